import subprocess
import sys
from pathlib import Path

import yaml

from proposal_intake.infrastructure.configuration.form_client_settings import FormClientSettings
from proposal_intake.infrastructure.entrypoints.form.proposal_form import ProposalForm
from proposal_intake.infrastructure.entrypoints.form.proposal_form_client import ProposalFormClient


def test():
    """Run tests using pytest."""
    cmd = ["pytest", "tests"]
    sys.exit(subprocess.call(cmd))

def lint():
    """Run linting checks."""
    print("Running ruff check...")
    rc = subprocess.call(["ruff", "check", "."])
    if rc != 0:
        sys.exit(rc)

    print("Running ruff format --check...")
    sys.exit(subprocess.call(["ruff", "format", "--check", "."]))

def submit_proposal():
    """Submit a proposal described in a YAML file: submit-proposal proposal.yaml"""
    if len(sys.argv) != 2:
        print("usage: submit-proposal <proposal.yaml>")
        sys.exit(2)

    values = yaml.safe_load(Path(sys.argv[1]).read_text(encoding="utf-8")) or {}
    if not isinstance(values, dict):
        print("usage: the proposal file must be a mapping of form fields")
        sys.exit(2)

    client = ProposalFormClient.from_settings(FormClientSettings())
    try:
        client.fill(values)
    except KeyError as e:
        print(f"usage: {e.args[0]}. Known fields: {', '.join(ProposalForm.field_names())}")
        sys.exit(2)

    status = client.submit()
    if status is None:
        print("The proposal has errors:")
        for field, message in client.errors.items():
            print(f"  {field}: {message}")
        sys.exit(1)

    if not status.succeeded:
        print(f"❌ {status.message}")
        sys.exit(1)

    print(f"✅ {status.message}")
    print(f"Ticket: {status.jira_key} -> {status.jira_url}")
