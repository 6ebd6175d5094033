"""Create a local virtual environment with MockMaster installed in editable mode."""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys

_ENV_TEMPLATE = "GEMINI_API_KEY=\n# GEMINI_MODEL=gemini-2.5-flash\n# LOG_LEVEL=INFO\n"


def run_command(command: list[str]) -> None:
	subprocess.run(command, check=True)


def venv_python_path(venv_path: Path) -> Path:
	if sys.platform.startswith("win"):
		return venv_path / "Scripts" / "python.exe"
	return venv_path / "bin" / "python"


def ensure_env_file(project_root: Path) -> None:
	env_file = project_root / ".env"
	if env_file.exists():
		return
	env_file.write_text(_ENV_TEMPLATE, encoding="utf-8")
	print(f"Created {env_file}; add your Gemini API key there.")


def main() -> None:
	project_root = Path(__file__).resolve().parent
	venv_path = project_root / ".venv"

	print(f"Using Python interpreter: {sys.executable}")
	run_command([sys.executable, "-m", "venv", str(venv_path)])

	venv_python = venv_python_path(venv_path)
	run_command([str(venv_python), "-m", "pip", "install", "--upgrade", "pip"])
	run_command([str(venv_python), "-m", "pip", "install", "-e", f"{project_root}[test]"])

	ensure_env_file(project_root)
	print(f"Done. Start the app with: {venv_python} app_main.py")


if __name__ == "__main__":
	main()
