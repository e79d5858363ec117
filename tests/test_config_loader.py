"""Help text yaml parsing."""

from mazelink.config_loader import parse_help_text


def test_parse_help_text() -> None:
    info = parse_help_text("labels:\n  Theta: Circle\nhelp_text:\n  size: Rings\n")
    assert info["labels"] == {"Theta": "Circle"}
    assert info["help_text"] == {"size": "Rings"}


def test_parse_empty_yaml() -> None:
    assert parse_help_text("") == {"labels": {}, "help_text": {}}
