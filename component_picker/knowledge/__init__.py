"""
Static reference data for the component picker.

Modules
-------
catalog   : Built-in component catalog, eligibility matrix and filters.
base      : KnowledgeBase (read-only accessors) + DEFAULT_KNOWLEDGE_BASE.
integrity : check_integrity() — catalog consistency findings.
loader    : load_knowledge_base() — authored TOML catalog → KnowledgeBase.
"""
