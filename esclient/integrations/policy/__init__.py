from .response_wrappers import classify_status, normalize_probe_response

__all__ = ["classify_status", "normalize_probe_response"]
