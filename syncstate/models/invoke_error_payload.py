from .message import Message


class InvokeErrorPayload(Message, kw_only=True):
    error_type: str
    message: str
