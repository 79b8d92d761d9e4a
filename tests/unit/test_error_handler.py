from emoji_cache_scanner.models import ErrorCode, ErrorLevel
from emoji_cache_scanner.utils.error_handler import ErrorHandler


def test_error_handler_collects_in_order() -> None:
    handler = ErrorHandler()
    handler.add_info(ErrorCode.CATEGORY_CREATED, "created qq")
    handler.add_warning(ErrorCode.TEARDOWN, "busy", file_path="/tmp/x")

    assert [error.level for error in handler.errors] == [ErrorLevel.INFO, ErrorLevel.RECOVERABLE]
    assert handler.errors[1].to_dict() == {
        "code": ErrorCode.TEARDOWN,
        "level": "W",
        "message": "busy",
        "file_path": "/tmp/x",
    }
