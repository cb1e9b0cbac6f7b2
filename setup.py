from setuptools import setup, find_namespace_packages

setup(
    name="srt-shift",
    version="0.1.0",
    description="Shift every timestamp in an SRT subtitle file by a fixed millisecond offset",
    packages=find_namespace_packages(include=["srt_shift", "srt_shift.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5.0",
        "rich>=13.7.0",
    ],
    extras_require={
        "dev": ["ruff>=0.1.0", "pytest>=7.4.0", "black>=23.0.0", "mypy>=1.7.0"],
    },
    entry_points={
        "console_scripts": [
            "srt-shift=srt_shift.main:cli",
        ],
    },
)
