"""
Routes package for the task board.

Each module exposes a blueprint factory taking the pipeline and the
services its handlers need:
- auth: inscription (presence-flag sign in)
- todo: task list and add-task form
- theme: light/dark toggle
"""
