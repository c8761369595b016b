"""Admin console for the clinical records backend.

This package contains the HTTP client for the backend API, the form
state and validators shared by every screen, and the views, templates
and route registrations of the console.
"""
