from __future__ import annotations

from salon_calendar.cli import build_parser
from salon_calendar.data import TokenStore
from salon_calendar.services import AuthService, NotificationLevel, Notifier


def test_notifier_fans_out_and_keeps_bounded_history():
    notifier = Notifier(history_size=2)
    received = []
    notifier.subscribe(received.append)

    notifier.info("a")
    notifier.success("b")
    notifier.error("c")

    assert [n.message for n in received] == ["a", "b", "c"]
    assert [(n.level, n.message) for n in notifier.history] == [
        (NotificationLevel.SUCCESS, "b"),
        (NotificationLevel.ERROR, "c"),
    ]


def test_token_store_persists_and_clears(tmp_path):
    path = tmp_path / "auth" / "token"
    TokenStore(path).set("  abc  ")

    reloaded = TokenStore(path)
    assert reloaded.get() == "abc"

    reloaded.clear()
    assert reloaded.get() is None
    assert not path.exists()


def test_auth_service_login_required_runs_handlers(tmp_path):
    auth = AuthService(TokenStore(tmp_path / "token"))
    calls = []
    auth.on_login_required(lambda: calls.append("login"))

    auth.sign_in("tok")
    assert auth.current_token() == "tok"
    auth.login_required()
    auth.sign_out()

    assert calls == ["login"]
    assert auth.current_token() is None


def test_cli_parser_commands():
    parser = build_parser()

    assert parser.parse_args(["list", "--narrow"]).narrow is True
    serve = parser.parse_args(["serve", "--port", "8080"])
    assert (serve.command, serve.port, serve.host) == ("serve", 8080, None)
