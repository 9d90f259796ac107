"""Domain exceptions."""

INVALID_USER_ID_MESSAGE = "Invalid user ID provided"


class InvalidUserIdError(ValueError):
    """ユーザー ID が空、または文字列でない場合に発生する例外"""

    def __init__(self, message: str = INVALID_USER_ID_MESSAGE) -> None:
        """初期化

        Args:
            message: エラーメッセージ（オプション）
        """
        super().__init__(message)
