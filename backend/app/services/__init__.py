# Services package init
"""
Portfolio Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and tables (persistence).
How:   One service per resource, each a ResourceService subclass exposing
       a module-level singleton. Every method runs a single statement and
       returns an Envelope.

Service Inventory:
    - ResourceService (base): get / list_all / create / update / delete
    - ProfileService:   + get_complete (joined counts and averages)
    - SkillService:     + by_type, high_proficiency
    - ProjectService:   + search_by_tag
    - EducationService
    - HobbyService:     list_all filtered by profile and category
    - ContactService:   + update_status, stats
"""
