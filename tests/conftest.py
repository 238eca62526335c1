import sys, textwrap
import pytest

from pingstats.config import CFG

SUMMARY = """\
--- example.com ping statistics ---
5 packets transmitted, 5 packets received, 0.0% packet loss
round-trip min/avg/max/stddev = 110.555/112.243/113.908/1.307 ms
"""


@pytest.fixture(autouse=True)
def log_path(tmp_path, monkeypatch):
    path = tmp_path / "pingstats.log"
    monkeypatch.setitem(CFG, "LOG_PATH", str(path))
    return path


@pytest.fixture
def fake_ping(tmp_path, monkeypatch):
    """
    Writes a shell script that behaves like ping: a reply line every 0.1s,
    then `summary` and `exit status` on SIGINT. It leaves its pid in
    ping.pid and its arguments, one per line, in ping.argv.
    """
    if sys.platform == "win32":
        pytest.skip("needs a POSIX shell")

    def make(summary=SUMMARY, status=0, on_int="summary", exit_now=None):
        if exit_now is not None:
            body = f'echo "ping: cannot resolve host: Unknown host"\nexit {exit_now}\n'
        else:
            trap = "trap '' INT" if on_int == "ignore" else "trap summary INT"
            body = textwrap.dedent("""\
                summary() {
                cat <<'EOS'
                %s
                EOS
                exit %d
                }
                %s
                while :; do
                  echo "64 bytes from 93.184.216.34: icmp_seq=0 ttl=56 time=110.555 ms"
                  sleep 0.1
                done
                """) % (summary.rstrip("\n"), status, trap)
        path = tmp_path / "ping"
        header = 'echo $$ > "$(dirname "$0")/ping.pid"\nprintf "%s\\n" "$@" > "$(dirname "$0")/ping.argv"\n'
        path.write_text("#!/bin/sh\n" + header + body)
        path.chmod(0o755)
        monkeypatch.setitem(CFG, "PING_BINARY", str(path))
        return path

    return make
