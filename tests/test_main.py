import pytest

from main import load_grammar, main


def test_prints_first_table(capsys):
    assert main(["doc", "--token", "c"]) == 0
    out = capsys.readouterr().out
    assert "<S> -> <A> 'b'" in out
    assert "{a}" in out
    assert "ε" in out


def test_reads_grammar_file(tmp_path, capsys):
    path = tmp_path / "list.grammar"
    path.write_text("<List> -> <List> 'item' | 'first'\n", encoding="utf-8")
    assert main([str(path), "--log-level", "DEBUG"]) == 0
    assert "{first}" in capsys.readouterr().out


def test_right_recursive_flag():
    grammar = load_grammar("json", right_recursive=True)
    assert "<N_1> -> <R_0> <N_1>" in str(grammar).splitlines()


def test_unknown_grammar():
    with pytest.raises(SystemExit) as exc_info:
        main(["no-such-grammar"])
    assert exc_info.value.code == 2
