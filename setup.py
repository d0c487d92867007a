from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "textsub" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/textsub/__init__.py")


setup(
    name="textsub",
    version=_read_version(),
    description="Template-based match replacement: $n templates, replace-first and regex split",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["textsub=textsub.cli:main"]},
)
