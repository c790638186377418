import pytest

from proposal_intake.scripts import submit_proposal


def run_with(monkeypatch, tmp_path, content):
    proposal = tmp_path / "proposal.yaml"
    proposal.write_text(content, encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["submit-proposal", str(proposal)])
    with pytest.raises(SystemExit) as exc:
        submit_proposal()
    return exc.value.code


@pytest.mark.respx(assert_all_called=False)
def test_unknown_field_is_a_usage_error(monkeypatch, tmp_path, capsys, respx_mock):
    route = respx_mock.post(url__regex=r".*").respond(200, json={"success": True})

    code = run_with(monkeypatch, tmp_path, "first_name: Jane\nnickname: JD\n")

    assert code == 2
    assert "Unknown form field: nickname" in capsys.readouterr().out
    assert not route.called


def test_non_mapping_file_is_a_usage_error(monkeypatch, tmp_path):
    assert run_with(monkeypatch, tmp_path, "- Jane\n- Doe\n") == 2


def test_missing_argument_is_a_usage_error(monkeypatch):
    monkeypatch.setattr("sys.argv", ["submit-proposal"])
    with pytest.raises(SystemExit) as exc:
        submit_proposal()
    assert exc.value.code == 2
