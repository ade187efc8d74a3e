"""
Persistence layer.

Repositories hold all SQL for their table and translate rows into the
pydantic records defined in ``schemas``.  Services call them; nothing
else touches the database.
"""
