from graduates.cqrs import notifications, shorts


def register_handlers(query_bus, command_bus, event_bus):
    notifications.register(query_bus, command_bus, event_bus)
    shorts.register(query_bus, command_bus)


__all__ = [
    "notifications",
    "register_handlers",
    "shorts",
]
