from .messages import Message, MessageLog

__all__ = ["Message", "MessageLog"]
