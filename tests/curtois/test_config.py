from __future__ import annotations

import pytest

from curtois.config import ParserConfig, cfg


def test_default_config_is_valid() -> None:
    cfg.validate()
    assert cfg.FIELD_DELIMITER == ","
    assert cfg.LIST_DELIMITER == "|"
    assert cfg.PAIR_DELIMITER == "="


@pytest.mark.parametrize(
    "overrides",
    [
        {"FIELD_DELIMITER": ",,"},
        {"LIST_DELIMITER": " "},
        {"PAIR_DELIMITER": ","},
        {"COMMENT_MARKER": "|"},
        {"ENCODING": ""},
        {"SECTION_PREFIX": ""},
    ],
)
def test_invalid_config_is_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        ParserConfig(**overrides).validate()
