"""Core helpers: response contract and the _call dispatcher."""

from __future__ import annotations

from debugstr import CliError, InvalidArgumentError
from debugstr.config import CONTRACT_SCHEMA_VERSION, MCP_RESPONSE_MODE


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _ensure_contract_dict(payload: dict) -> dict:
    """Add stable contract metadata to dict responses."""
    out = dict(payload)
    out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
    if out.get("ok") is False:
        return out
    out.setdefault("ok", True)
    return out


def _finalize_tool_result(result: dict) -> dict:
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): dicts gain contract metadata (ok/schema_version).
        - envelope: success is returned as {"ok", "schema_version", "data"}.
    """
    normalized = _ensure_contract_dict(result)
    if normalized.get("ok") is False or MCP_RESPONSE_MODE != "envelope":
        return normalized
    data = dict(normalized)
    data.pop("ok", None)
    data.pop("schema_version", None)
    return {
        "ok": True,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "data": data,
    }


def _call(fn, *args, **kwargs) -> dict:
    """Call a render/inspect function, converting exceptions to error dicts."""
    try:
        return fn(*args, **kwargs)
    except InvalidArgumentError as e:
        return _contract_error(str(e), "invalid_argument")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
