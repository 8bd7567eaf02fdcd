"""Core components of dosshell"""
