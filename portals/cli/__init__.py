"""
This package contains the interactive console programs.
"""
