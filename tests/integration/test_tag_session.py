import io
import json
import os
import stat
from pathlib import Path

import pytest

from smart_tags.cli import main
from smart_tags.config import RunConfig
from smart_tags.core.yaml import parse_frontmatter
from smart_tags.errors import DocumentIOError, StructuralError
from smart_tags.pipeline.tag_document import tag_document
from smart_tags.prompts import ConsolePrompter, ScriptedPrompter

BODY = "\n# Meeting notes\n\nDiscussed the project.\n"

def _note(tmp_path: Path, text: str = "---\ntitle: Notes\ntags: draft\n---\n" + BODY) -> Path:
    p = tmp_path / "note.md"
    p.write_text(text, encoding="utf-8")
    return p

def _db(tmp_path: Path, tags) -> Path:
    p = tmp_path / "db" / "tags_db.json"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"tags": tags}), encoding="utf-8")
    return p

def _run(note: Path, db: Path, tags, prompter, dry_run: bool = False):
    cfg = RunConfig(document=note, tags=tuple(tags), db_path=db, dry_run=dry_run)
    return tag_document(cfg, prompter)

def test_alias_learning_persists_across_sessions(tmp_path: Path) -> None:
    note = _note(tmp_path)
    db = _db(tmp_path, [{"name": "project", "aliases": []}])

    stats = _run(note, db, ["proj"], ScriptedPrompter(choices=[1]))
    assert stats.vocabulary_saved
    assert json.loads(db.read_text(encoding="utf-8"))["tags"] == [{"name": "project", "aliases": ["proj"]}]

    second = ScriptedPrompter()
    stats = _run(note, db, ["proj"], second)
    assert stats.tags == ["project"]
    assert not stats.vocabulary_saved
    assert second.menus == [] and second.questions == []

    fm = parse_frontmatter(note.read_text(encoding="utf-8"))
    assert fm.data == {"title": "Notes", "tags": ["draft", "project"]}
    assert fm.body == BODY

def test_declined_registration_still_tags_document(tmp_path: Path) -> None:
    note = _note(tmp_path)
    db = tmp_path / "tags_db.json"

    first = ScriptedPrompter(confirmations=[False])
    _run(note, db, ["urgent"], first)
    assert not db.exists()
    assert parse_frontmatter(note.read_text(encoding="utf-8")).data["tags"] == ["draft", "urgent"]

    second = ScriptedPrompter(confirmations=[False])
    _run(note, db, ["urgent"], second)
    assert len(second.questions) == 1

def test_new_tag_creates_store_with_parent_dirs(tmp_path: Path) -> None:
    note = _note(tmp_path, "plain text, no front matter\n")
    db = tmp_path / "a" / "b" / "tags_db.json"
    _run(note, db, ["x"], ScriptedPrompter(confirmations=[True]))
    assert json.loads(db.read_text(encoding="utf-8")) == {"tags": [{"name": "x", "aliases": []}]}
    assert note.read_text(encoding="utf-8") == "---\ntags:\n- x\n---\nplain text, no front matter\n"

def test_structural_error_writes_nothing(tmp_path: Path) -> None:
    original = "---\n- not\n- a mapping\n---\n" + BODY
    note = _note(tmp_path, original)
    db = tmp_path / "tags_db.json"
    with pytest.raises(StructuralError):
        _run(note, db, ["new"], ScriptedPrompter(confirmations=[True]))
    assert not db.exists()
    assert note.read_text(encoding="utf-8") == original

def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    note = _note(tmp_path)
    original = note.read_text(encoding="utf-8")
    db = tmp_path / "tags_db.json"
    stats = _run(note, db, ["idea"], ScriptedPrompter(confirmations=[True]), dry_run=True)
    assert stats.tags == ["idea"]
    assert not stats.document_written
    assert not db.exists()
    assert note.read_text(encoding="utf-8") == original

def test_missing_document_is_reported_with_path(tmp_path: Path) -> None:
    missing = tmp_path / "missing.md"
    with pytest.raises(DocumentIOError) as exc:
        _run(missing, tmp_path / "tags_db.json", ["x"], ScriptedPrompter())
    assert exc.value.path == missing

def test_cli_success_and_db_from_env(tmp_path: Path, monkeypatch) -> None:
    note = _note(tmp_path)
    db = _db(tmp_path, [{"name": "project", "aliases": ["proj"]}])
    monkeypatch.setenv("SMART_TAGS_DB", str(db))
    assert main([str(note), "proj", "project"], prompter=ScriptedPrompter()) == 0
    assert parse_frontmatter(note.read_text(encoding="utf-8")).data["tags"] == ["draft", "project"]

def test_cli_db_flag_wins_over_env(tmp_path: Path, monkeypatch) -> None:
    note = _note(tmp_path)
    flag_db = tmp_path / "flag.json"
    monkeypatch.setenv("SMART_TAGS_DB", str(tmp_path / "env.json"))
    assert main([str(note), "idea", "--db", str(flag_db)], prompter=ScriptedPrompter(confirmations=[True])) == 0
    assert flag_db.exists()
    assert not (tmp_path / "env.json").exists()

def test_cli_failure_exit_code(tmp_path: Path) -> None:
    rc = main(
        [str(tmp_path / "missing.md"), "x", "--db", str(tmp_path / "db.json")],
        prompter=ScriptedPrompter(),
    )
    assert rc == 1

def test_rewrite_keeps_document_mode(tmp_path: Path) -> None:
    note = _note(tmp_path)
    os.chmod(note, 0o644)
    _run(note, tmp_path / "tags_db.json", ["x"], ScriptedPrompter(confirmations=[True]))
    assert stat.S_IMODE(note.stat().st_mode) == 0o644
    assert parse_frontmatter(note.read_text(encoding="utf-8")).data["tags"] == ["draft", "x"]

def test_rewrite_follows_symlinked_document(tmp_path: Path) -> None:
    real = _note(tmp_path)
    link = tmp_path / "link.md"
    link.symlink_to(real)
    _run(link, tmp_path / "tags_db.json", ["x"], ScriptedPrompter(confirmations=[False]))
    assert link.is_symlink()
    assert parse_frontmatter(real.read_text(encoding="utf-8")).data["tags"] == ["draft", "x"]
    assert sorted(x.name for x in tmp_path.iterdir()) == ["link.md", "note.md"]

def test_cli_no_answer_exit_code(tmp_path: Path) -> None:
    note = _note(tmp_path)
    original = note.read_text(encoding="utf-8")
    prompter = ConsolePrompter(stdin=io.StringIO(""), stdout=io.StringIO())
    rc = main([str(note), "idea", "--db", str(tmp_path / "db.json")], prompter=prompter)
    assert rc == 1
    assert note.read_text(encoding="utf-8") == original
