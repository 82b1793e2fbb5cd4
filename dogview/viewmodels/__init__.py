"""ViewModel package for UI state and command surfaces.

Call context:
    ``dogview/web_ui/main.py`` and ``dogview/web_ui/runtime.py`` import
    concrete viewmodels from this package to bind page callbacks to state
    transitions.

Dependencies:
    Modules in this package depend on domain types, use cases, and
    lightweight formatting helpers only. I/O adapters stay outside.

Responsibilities:
    - Expose UI state and command intent coroutines.
    - Transform domain records into view-facing render instructions.
    - Keep MVVM boundaries explicit by avoiding transport or widget logic.
"""
