"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from svnkit.svn.context import ExecutionContext, ProxySettings


@dataclass
class SvnConfig:
    binary: str = "svn"
    locale: str = "en_US.UTF-8"  # forced into LANG / LC_ALL


@dataclass
class ContextConfig:
    ssl_verify: bool = True
    connection_timeout: int = 0  # seconds, 0 = no deadline
    non_interactive: bool = True
    username: Optional[str] = None
    password: Optional[str] = None  # env only; never written by `init`


@dataclass
class ProxyConfig:
    enabled: bool = False
    host: str = ""
    port: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    bypass_for_local: bool = False


@dataclass
class LogConfig:
    limit: int = 100


@dataclass
class OutputConfig:
    indent: int = 2


@dataclass
class SvnKitConfig:
    version: str = "1.0"
    svn: SvnConfig = field(default_factory=SvnConfig)
    context: ContextConfig = field(default_factory=ContextConfig)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    log: LogConfig = field(default_factory=LogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def execution_context(self) -> ExecutionContext:
        """Build the runner's ExecutionContext from the context/proxy sections."""
        return ExecutionContext(
            ssl_verify=self.context.ssl_verify,
            connection_timeout=self.context.connection_timeout,
            non_interactive=self.context.non_interactive,
            username=self.context.username,
            password=self.context.password,
            proxy=ProxySettings(
                enabled=self.proxy.enabled,
                host=self.proxy.host,
                port=self.proxy.port,
                username=self.proxy.username,
                password=self.proxy.password,
                bypass_for_local=self.proxy.bypass_for_local,
            ),
        )
