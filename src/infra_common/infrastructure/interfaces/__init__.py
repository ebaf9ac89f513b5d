from .cache import Cache
from .message_broker import ConsumerFunc, MessageBroker, MessagePublisher

__all__ = ["Cache", "ConsumerFunc", "MessageBroker", "MessagePublisher"]
