"""
Mission Design Core - Setup Script
==================================

Installs the orbit, eclipse, power and ground-access analysis package and the
`mission-design` command.
"""

from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent

with open(this_directory / "requirements.txt", 'r', encoding='utf-8') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name="mission-design-core",
    version="1.0.0",
    description="Orbit propagation, eclipse, solar and ground-station access analysis",
    long_description=(this_directory / "README.md").read_text(encoding='utf-8'),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0.0', 'pytest-cov>=4.0.0'],
    },
    entry_points={
        "console_scripts": [
            "mission-design=mission_design.main:main",
        ],
    },
    zip_safe=False,
)
