"""
Fact collector - the fallback chain for every fact, evaluated in output order.

Native OS interfaces come first, files next, and spawning a utility is the
last resort. Every probe is called at most once per collection.
"""

from functools import partial
from typing import Dict, Iterator, List, Optional

import command_reader
import display_probe
import env_probe
import file_reader
import runtime_probe
from command_reader import DEFAULT_TIMEOUT
from facts import Fact, FactName, FallbackChain, Source, resolve_fact
from text_utils import strip_newline


def _shell_from_parent(timeout: float):
    return command_reader.shell_with_version(file_reader.read_parent_comm(), timeout=timeout)


def _shell_from_env(timeout: float):
    return command_reader.shell_with_version(env_probe.probe_shell_env(), timeout=timeout)


def fact_chains(timeout: float = DEFAULT_TIMEOUT) -> Dict[FactName, FallbackChain]:
    """Fallback chains for every fact that is not resolved by the display probe."""
    os_release, usr_os_release = file_reader.OS_RELEASE_PATHS
    return {
        FactName.HOSTNAME: (
            (Source.FILE, file_reader.probe_hostname_file),
            (Source.NATIVE, file_reader.probe_hostname_native),
        ),
        FactName.OS: (
            (Source.FILE, partial(file_reader.probe_os_pretty_name, os_release)),
            (Source.FILE, partial(file_reader.probe_os_pretty_name, usr_os_release)),
            (Source.FILE, partial(file_reader.probe_os_pretty_name_unquoted, os_release)),
            (Source.FILE, partial(file_reader.probe_os_pretty_name_unquoted, usr_os_release)),
        ),
        FactName.KERNEL: (
            (Source.NATIVE, command_reader.probe_kernel_native),
            (Source.SUBPROCESS, partial(command_reader.probe_kernel_command, timeout)),
        ),
        FactName.DESKTOP: (
            (Source.ENV, env_probe.probe_desktop),
        ),
        FactName.UPTIME: (
            (Source.FILE, runtime_probe.probe_uptime_proc),
            (Source.NATIVE, runtime_probe.probe_uptime_boottime),
            (Source.SUBPROCESS, partial(command_reader.probe_uptime_command, timeout)),
        ),
        FactName.SHELL: (
            (Source.FILE, partial(_shell_from_parent, timeout)),
            (Source.ENV, partial(_shell_from_env, timeout)),
        ),
    }


def _single_line(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return strip_newline(value) or None


def iter_facts(timeout: float = DEFAULT_TIMEOUT) -> Iterator[Fact]:
    """Yield each fact as soon as it is known, in output order."""
    chains = fact_chains(timeout)
    window_manager = None
    for name in FactName:
        if name is FactName.SESSION_TYPE:
            session_type, window_manager = display_probe.detect_session_and_wm()
            yield Fact(name, _single_line(session_type))
        elif name is FactName.WINDOW_MANAGER:
            yield Fact(name, _single_line(window_manager))
        else:
            yield resolve_fact(name, chains[name])


def collect_facts(timeout: float = DEFAULT_TIMEOUT) -> List[Fact]:
    return list(iter_facts(timeout))
