"""Logging utilities"""

import json
from datetime import datetime, timezone

import linkedin_auto_apply.config as config


def log_result(job_url, status, reason="", **extra):
    """Log a run/application result to the JSONL file"""
    result = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "job_url": job_url,
        "status": status,
    }
    if reason:
        result["reason"] = reason
    result.update(extra)

    with open(config.LOG_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(result, ensure_ascii=False) + "\n")

    print(f"[{status}] {job_url}")
    if reason:
        print(f"  Reason: {reason}")


def format_elapsed_time(seconds):
    """Format elapsed time in human-readable format"""
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        mins = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{mins}m {secs}s"
    else:
        hours = int(seconds // 3600)
        mins = int((seconds % 3600) // 60)
        return f"{hours}h {mins}m"
