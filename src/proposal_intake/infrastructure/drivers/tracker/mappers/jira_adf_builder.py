import re
from typing import Any, Dict, List

_BLANK_LINE = re.compile(r"\n\s*\n")


class JiraAdfBuilder:
    """
    Builder for Atlassian Document Format (ADF) structures used in issue descriptions.
    """

    @staticmethod
    def _create_doc(content: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "type": "doc",
            "version": 1,
            "content": content
        }

    @staticmethod
    def _create_paragraph(content: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "type": "paragraph",
            "content": content
        }

    @staticmethod
    def _create_text(text: str) -> Dict[str, Any]:
        return {
            "type": "text",
            "text": text
        }

    @classmethod
    def text_to_adf(cls, text: str | None) -> Dict[str, Any]:
        """One paragraph per blank-line separated block; empty input gives an empty doc."""
        if not text:
            return cls._create_doc([])

        paragraphs = [block.strip() for block in _BLANK_LINE.split(text)]
        return cls._create_doc([
            cls._create_paragraph([cls._create_text(paragraph)])
            for paragraph in paragraphs
            if paragraph
        ])
