"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Example:
    from app.infrastructure.firebase.client import get_firestore_client
    from app.infrastructure.firebase.collections import COLLECTION_TASKS

    db = get_firestore_client()
    if db:
        snapshot = await db.collection(COLLECTION_TASKS).document(task_id).get()
"""

COLLECTION_TASKS = "tasks"

# Owned by the surrounding application; read-only here.
COLLECTION_TEAMS = "teams"
COLLECTION_USERS = "users"
