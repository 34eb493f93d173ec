# setup.py
from setuptools import setup, find_packages
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="trein",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["trein", "trein.*"]),
    description="Select a Wayland screen area, OCR it with Tesseract and translate it with DeepL.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires=">=3.8",

    install_requires=[
        "pytesseract",
        "Pillow",
        "requests",
        "pyperclip>=1.8.2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'trein=trein.cli:main',
        ],
    },
)
