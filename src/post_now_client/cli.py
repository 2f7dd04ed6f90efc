from __future__ import annotations

import argparse
import json
from typing import Sequence

from .config import ConfigError, load_settings
from .exceptions import ApiError
from .registry import ApiClientRegistry


def _registry(args: argparse.Namespace) -> ApiClientRegistry:
    return ApiClientRegistry(settings=load_settings(args.env_file))


def _print(payload: object) -> None:
    print(json.dumps(payload, indent=2, default=str))


def cmd_login(args: argparse.Namespace) -> None:
    registry = _registry(args)
    response = registry.login(args.username, args.password)
    _print({"username": response.username, "message": response.message, "authenticated": True})


def cmd_logout(args: argparse.Namespace) -> None:
    registry = _registry(args)
    registry.logout()
    _print({"authenticated": False})


def cmd_token(args: argparse.Namespace) -> None:
    registry = _registry(args)
    token = registry.get_auth_token()
    payload: dict[str, object] = {"authenticated": token is not None, "api_base_url": registry.settings.api_base_url}
    if args.show:
        payload["token"] = token
    _print(payload)


def cmd_me(args: argparse.Namespace) -> None:
    registry = _registry(args)
    user = registry.users.get_current_user()
    _print(user.model_dump(mode="json", exclude_none=True))


def cmd_validate(args: argparse.Namespace) -> None:
    registry = _registry(args)
    result = registry.auth.validate_token()
    _print(result.model_dump(exclude_none=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="post-now", description="Post Now API client")
    parser.add_argument("--env-file", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login")
    login_parser.add_argument("--username", required=True)
    login_parser.add_argument("--password", required=True)
    login_parser.set_defaults(func=cmd_login)

    logout_parser = subparsers.add_parser("logout")
    logout_parser.set_defaults(func=cmd_logout)

    token_parser = subparsers.add_parser("token")
    token_parser.add_argument("--show", action="store_true", help="print the stored token value")
    token_parser.set_defaults(func=cmd_token)

    me_parser = subparsers.add_parser("me")
    me_parser.set_defaults(func=cmd_me)

    validate_parser = subparsers.add_parser("validate")
    validate_parser.set_defaults(func=cmd_validate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except ApiError as exc:
        _print({"error": exc.code, "message": exc.message, "status_code": exc.status_code})
        return 1
    except ConfigError as exc:
        _print({"error": "CONFIG_ERROR", "message": str(exc)})
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
