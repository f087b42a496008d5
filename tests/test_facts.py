"""
Tests for the fact model and fallback-chain evaluation.
"""

from facts import Fact, FactName, ProbeResult, Source, resolve_fact, run_chain


def _probe(value, calls):
    def probe():
        calls.append(value)
        return value
    return probe


class TestRunChain:
    def test_first_present_wins(self):
        calls = []
        chain = (
            (Source.ENV, _probe(None, calls)),
            (Source.FILE, _probe("from file", calls)),
            (Source.SUBPROCESS, _probe("never", calls)),
        )
        assert run_chain(chain) == ProbeResult("from file", Source.FILE)
        assert calls == [None, "from file"]

    def test_empty_string_is_absent(self):
        calls = []
        chain = ((Source.ENV, _probe("", calls)), (Source.NATIVE, _probe("native", calls)))
        assert run_chain(chain).source is Source.NATIVE

    def test_all_absent(self):
        assert run_chain(((Source.ENV, lambda: None),)) is None

    def test_empty_chain(self):
        assert run_chain(()) is None

    def test_value_is_single_line(self):
        result = run_chain(((Source.SUBPROCESS, lambda: "Linux\n"),))
        assert result.value == "Linux"

    def test_newline_only_is_absent(self):
        assert run_chain(((Source.SUBPROCESS, lambda: "\n"),)) is None


class TestFact:
    def test_render_present(self):
        assert Fact(FactName.KERNEL, "Linux 6.8.0").render() == "Kernel: Linux 6.8.0"

    def test_render_missing_os(self):
        assert Fact(FactName.OS, None).render() == "Operating System not found."

    def test_render_missing_other(self):
        assert Fact(FactName.WINDOW_MANAGER, None).render() == "Window Manager/Compositor not recognized."

    def test_output_order(self):
        assert [name.label for name in FactName] == [
            "Hostname",
            "Operating System",
            "Kernel",
            "Session Type",
            "Desktop Environment",
            "Window Manager/Compositor",
            "Uptime",
            "Shell",
        ]

    def test_resolve(self):
        assert resolve_fact(FactName.SHELL, ((Source.ENV, lambda: "zsh 5.9"),)) == Fact(FactName.SHELL, "zsh 5.9")
        assert resolve_fact(FactName.SHELL, ()) == Fact(FactName.SHELL, None)
