"""
Portfolio Backend — API Routes Package
========================================

One router per resource; each serves a single URL and dispatches on
the `action` query parameter (see dispatch.py).

Route Inventory:
    - profile.py:    /api/profile     read, add, update, delete, complete
    - skills.py:     /api/skills      read, by_type, high_proficiency, add, update, delete
    - projects.py:   /api/projects    read, search, add, update, delete
    - education.py:  /api/education   read, add, update, delete
    - hobbies.py:    /api/hobbies     read, add, update, delete
    - contacts.py:   /api/contacts    read, stats, add, submit, update_status, delete
    - health.py:     GET /health      database probe
"""
