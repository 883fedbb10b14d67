"""Lines, tokens, a queue, AST node classes and file scanning for Gherkin feature files."""

__version__ = "0.1.0"
__all__ = ["ast", "gherkin_line", "item_queue", "reader", "tokens"]