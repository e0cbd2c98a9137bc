# topmark:header:start
#
#   project      : TermOut
#   file         : __init__.py
#   file_relpath : src/termout/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for TermOut: logging, color resolution and TOML settings.

Submodules are imported explicitly (``termout.config.logging``,
``termout.config.model``, ...) so that low-level modules can use the logging
layer without pulling in the whole configuration stack.
"""
