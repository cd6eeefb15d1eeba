import pytest

from core.errors import AppErrorException, ErrorCode
from languages.ukrainian.debug import TAGGED_FILE, UNKNOWN_FILE, FileDebugSink, format_tagged
from languages.ukrainian.tags import AnalyzedToken, parse_tag


def token(word, tag, lemma):
    return AnalyzedToken(word, parse_tag(tag).unwrap(), lemma)


def test_format_groups_tags_by_lemma():
    line = format_tagged([
        token("рік-два", "noun:m:v_naz", "рік-два"),
        token("рік-два", "noun:m:v_zna", "рік-два"),
    ])
    assert line == "рік-два рік-два noun:m:v_naz|noun:m:v_zna"


def test_format_separates_lemmas():
    line = format_tagged([
        token("Буш-молодший", "noun:m:v_naz:anim", "Буш-молодий"),
        token("Буш-молодший", "noun:m:v_naz:anim", "буш-молодий"),
    ])
    assert line == "Буш-молодший Буш-молодий noun:m:v_naz:anim, буш-молодий noun:m:v_naz:anim"


def test_file_sink_writes_both_logs(tmp_path):
    (tmp_path / UNKNOWN_FILE).write_text("stale\n", encoding="utf-8")
    with FileDebugSink(tmp_path) as sink:
        sink.append_unknown("місяця-князя inanim-anim")
        sink.append_unknown("місяця-князя")
        sink.append_tagged([token("екс-чемпіон", "noun:m:v_naz:anim", "екс-чемпіон")])
        sink.append_tagged([])

    assert (tmp_path / UNKNOWN_FILE).read_text(encoding="utf-8") == "місяця-князя inanim-anim\nмісяця-князя\n"
    assert (tmp_path / TAGGED_FILE).read_text(encoding="utf-8") == "екс-чемпіон екс-чемпіон noun:m:v_naz:anim\n"


def test_lines_are_flushed_immediately(tmp_path):
    sink = FileDebugSink(tmp_path)
    sink.append_unknown("щось-там")
    assert (tmp_path / UNKNOWN_FILE).read_text(encoding="utf-8") == "щось-там\n"
    sink.close()


def test_unwritable_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(AppErrorException) as exc_info:
        FileDebugSink(blocker / "logs")
    assert exc_info.value.error.code is ErrorCode.E6003_FILE_WRITE_ERROR


def test_failed_open_closes_the_first_file(tmp_path, monkeypatch):
    (tmp_path / TAGGED_FILE).mkdir()
    opened = []
    open_file = FileDebugSink._open

    def recording_open(path):
        stream = open_file(path)
        opened.append(stream)
        return stream

    monkeypatch.setattr(FileDebugSink, "_open", staticmethod(recording_open))
    with pytest.raises(AppErrorException):
        FileDebugSink(tmp_path)
    assert len(opened) == 1
    assert opened[0].closed


def test_write_after_close(tmp_path):
    sink = FileDebugSink(tmp_path)
    sink.close()
    with pytest.raises(AppErrorException):
        sink.append_unknown("пізно")
