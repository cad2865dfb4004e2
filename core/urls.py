"""
URL configuration for the navmenu project.

The app renders menus for whatever views a project defines; this project
only ships the menu library and its tests.
"""

urlpatterns = []
