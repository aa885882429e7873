from __future__ import annotations


class UnwrapError(Exception):
    """Raised when an unwrap-family accessor is called on the wrong variant.

    ``payload`` holds whatever the container was carrying: the success value
    for ``unwrap_err``/``expect_err``, the error for ``unwrap``/``expect`` on
    an ``Err``, and ``None`` for an absent ``Option``.
    """

    payload: object

    def __init__(self, message: str, payload: object = None) -> None:
        super().__init__(message)
        self.payload = payload

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""
