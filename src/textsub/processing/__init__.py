"""Public API surface for textsub.processing."""
__all__ = [
    "matchers",
    "replace_driver",
    "template_compiler",
    "template_renderer",
    "text_ops",
]
