"""Explicit command, query and event dispatch.

Each bus maps a message class to the function that handles it. Nothing is
discovered implicitly: handlers are registered by
``graduates.cqrs.register_handlers`` when the application is created.
"""


class HandlerNotFoundError(LookupError):
    def __init__(self, message_type):
        super().__init__(f"No handler registered for {message_type.__name__}")
        self.message_type = message_type


class _Bus:
    def __init__(self):
        self._handlers = {}

    def register(self, message_type, handler):
        self._handlers[message_type] = handler

    def handler_for(self, message_type):
        handler = self._handlers.get(message_type)
        if handler is None:
            raise HandlerNotFoundError(message_type)
        return handler

    def execute(self, message):
        return self.handler_for(type(message))(message)


class QueryBus(_Bus):
    pass


class CommandBus(_Bus):
    pass


class EventBus:
    def __init__(self):
        self._subscribers = {}

    def subscribe(self, event_type, handler):
        handlers = self._subscribers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_type, handler):
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event):
        for handler in self._subscribers.get(type(event), []):
            handler(event)
