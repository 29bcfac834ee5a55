"""Engine building blocks: blackboard, settings, vertex data, transforms, rectangle packing and text editing with undo."""

__version__ = "0.1.0"

__all__ = [
    "blackboard",
    "rectpack",
    "rendering",
    "settings",
    "textedit",
    "textlayout",
    "textundo",
    "transform",
]