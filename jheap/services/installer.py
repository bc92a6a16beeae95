from __future__ import annotations


def render_response_file(install_dir: str) -> str:
    lines = [
        "INSTALLER_UI=silent",
        "LICENSE_ACCEPTED=TRUE",
        f"USER_INSTALL_DIR={install_dir}",
    ]
    return "\n".join(lines) + "\n"
