"""Front ends for dosshell"""
