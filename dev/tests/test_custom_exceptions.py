from gbafix.exceptions import (
    GbaFixError,
    HeaderTooSmallError,
    PatchParseError,
    RomFileError,
    ValidationError,
    ConfigurationError,
)


def test_patch_parse_error_message_and_details():
    error = PatchParseError("title too long", token="-tThisIsThirteen")

    assert str(error) == "couldn't parse '-tThisIsThirteen': title too long"
    assert error.error_code == "PATCH_PARSE_ERROR"
    assert error.details == {"token": "-tThisIsThirteen", "reason": "title too long"}


def test_per_file_errors_share_base():
    error = HeaderTooSmallError("too small", rom_path="a.gba", size=12)

    assert isinstance(error, RomFileError)
    assert isinstance(error, GbaFixError)
    payload = error.to_dict()
    assert payload["error_code"] == "HEADER_TOO_SMALL"
    assert payload["details"] == {"size": 12, "rom_path": "a.gba"}
    assert "timestamp" in payload


def test_validation_error_is_configuration_error():
    error = ValidationError("bad", field_name="log_level", file_path="cfg.json")
    assert isinstance(error, ConfigurationError)
    assert error.details == {"field_name": "log_level", "file_path": "cfg.json"}
