"""MongoDB adapters for the task and user repositories."""

USERS_COLLECTION_NAME = 'users'
TASKS_COLLECTION_NAME = 'tasks'
