"""Translate connection settings into svn flags and a temporary config dir.

Proxy credentials go into a private ``servers`` file under a temporary
``--config-dir`` rather than into the environment, and the directory is
removed as soon as the command finishes.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)

# Never includes "other"
ALLOWED_SSL_FAILURES = ("unknown-ca", "hostname-mismatch", "expired", "not-yet-valid")

_SECRET_FLAGS = frozenset({"--password"})


@dataclass(frozen=True)
class ProxySettings:
    enabled: bool = False
    host: str = ""
    port: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    bypass_for_local: bool = False

    @property
    def usable(self) -> bool:
        return self.enabled and bool(self.host) and self.port > 0


@dataclass(frozen=True)
class ExecutionContext:
    """Connection settings applied to every command of a client."""

    ssl_verify: bool = True
    connection_timeout: int = 0  # seconds, 0 = wait forever
    non_interactive: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    proxy: ProxySettings = field(default_factory=ProxySettings)

    @property
    def timeout(self) -> Optional[float]:
        return float(self.connection_timeout) if self.connection_timeout > 0 else None

    def option_args(self) -> List[str]:
        """Flags appended after the subcommand's own arguments."""
        opts: List[str] = []
        if self.non_interactive or not self.ssl_verify:
            opts.append("--non-interactive")
        if not self.ssl_verify:
            opts += ["--trust-server-cert-failures", ",".join(ALLOWED_SSL_FAILURES)]
        if self.username:
            opts += ["--username", self.username]
        if self.password:
            opts += ["--password", self.password, "--no-auth-cache"]
        return opts


def servers_config(proxy: ProxySettings) -> str:
    """Render the ``servers`` file for *proxy*."""
    lines = [
        "[global]",
        f"http-proxy-host = {proxy.host}",
        f"http-proxy-port = {proxy.port}",
    ]
    if proxy.username:
        lines.append(f"http-proxy-username = {proxy.username}")
    if proxy.password:
        lines.append(f"http-proxy-password = {proxy.password}")
    if proxy.bypass_for_local:
        lines.append("http-proxy-exceptions = localhost, 127.0.0.1")
    return "\n".join(lines) + "\n"


def _write_private(path: Path, text: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)


@contextmanager
def prepared_args(
    args: Sequence[str],
    context: Optional[ExecutionContext] = None,
    *,
    where: str = "",
) -> Iterator[List[str]]:
    """Yield the full argument vector for *args* under *context*.

    A temporary config directory is created for an enabled proxy and lives
    only for the duration of the ``with`` block.
    """
    if context is None:
        yield list(args)
        return

    if not context.ssl_verify:
        logger.warning("SSL certificate verification bypassed for %s", where or os.getcwd())

    if not context.proxy.usable:
        yield [*args, *context.option_args()]
        return

    with tempfile.TemporaryDirectory(prefix="svn-config-") as config_dir:
        _write_private(Path(config_dir) / "servers", servers_config(context.proxy))
        yield ["--config-dir", config_dir, *args, *context.option_args()]


def mask_secrets(args: Sequence[str]) -> List[str]:
    """Return a copy of *args* safe to log."""
    masked: List[str] = []
    hide_next = False
    for arg in args:
        masked.append("****" if hide_next else arg)
        hide_next = arg in _SECRET_FLAGS
    return masked
