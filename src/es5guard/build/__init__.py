"""Build integration — post-build hook that checks emitted assets."""

from es5guard.build.adapter import Es5CheckHook, HookConfig, HookState
from es5guard.build.models import Compilation

__all__ = ["Compilation", "Es5CheckHook", "HookConfig", "HookState"]
