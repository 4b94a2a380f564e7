from steering_rules.tui.renderers import SteeringConsoleUI

__all__ = ["SteeringConsoleUI"]
