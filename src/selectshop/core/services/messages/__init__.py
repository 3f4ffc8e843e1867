from .message_resolver import MessageResolver

__all__ = ["MessageResolver"]
