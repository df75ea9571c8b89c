"""
Services package for the task board.

Each service owns one concern of the request pipeline:
- session_store: raw-string and JSON access to the session mapping
- task_repository: the session-scoped task list
- theme: the light/dark preference cookie
- action_logger: the append-only audit file
- auth_gate: the presence-flag login check
"""
