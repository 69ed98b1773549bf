# termsnake/core/__init__.py
