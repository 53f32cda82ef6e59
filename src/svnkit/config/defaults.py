"""Starter .svnkit.toml template."""

DEFAULT_TOML = """\
# svnkit configuration
version = "1.0"

[svn]
binary = "svn"              # path to the svn client
locale = "en_US.UTF-8"      # UTF-8 locale forced on every command

[context]
ssl_verify = true
connection_timeout = 0      # seconds; 0 = no deadline
non_interactive = true
# username = "alice"        # password only via SVNKIT_PASSWORD

[proxy]
enabled = false
# host = "proxy.example.com"
# port = 3128
# bypass_for_local = true

[log]
limit = 100

[output]
indent = 2
"""
