"""Behavioral pattern exceptions."""

from pattern_catalogue.domain.base.exceptions import PatternError, ValidationError


class ChainCycleError(ValidationError):
    """Raised when linking a handler would close a loop in the chain."""

    def __init__(self, handler_name: str):
        super().__init__(
            f"Linking {handler_name} would create a cycle in the chain",
            "CHAIN_CYCLE",
            {"handler": handler_name},
        )


class UnknownComponentError(PatternError):
    """Raised when a component the mediator does not know sends a message."""

    def __init__(self, component_name: str):
        super().__init__(
            f"Component {component_name} is not registered with the mediator",
            "UNKNOWN_COMPONENT",
            {"component": component_name},
        )


class EmptyHistoryError(PatternError):
    """Raised when undo is requested with no saved snapshot."""

    def __init__(self):
        super().__init__("Cannot undo: history is empty", "EMPTY_HISTORY")


class StrategyNotSetError(PatternError):
    """Raised when a context runs before a strategy is set."""

    def __init__(self, context_name: str):
        super().__init__(
            f"{context_name} has no strategy set",
            "STRATEGY_NOT_SET",
            {"context": context_name},
        )


class StateNotSetError(PatternError):
    """Raised when a state machine is driven before it has a current state."""

    def __init__(self, context_name: str):
        super().__init__(
            f"{context_name} has no current state",
            "STATE_NOT_SET",
            {"context": context_name},
        )


class InvalidStateTransitionError(PatternError):
    """Raised when no transition exists for a state and event."""

    def __init__(self, current_state: str, event: str):
        super().__init__(
            f"Cannot handle {event} in state {current_state}",
            "INVALID_STATE_TRANSITION",
            {"current_state": current_state, "event": event},
        )
