"""
# jsubst: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Pattern-based find-and-replace for a JSON expression engine.
"""
