from setuptools import find_namespace_packages, setup

setup(
    name="jheap",
    version="0.1.0",
    description="Translate a container memory limit into a JVM -Xmx option.",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["jheap", "jheap.*"]),
    install_requires=[
        "result",
        "rich",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["jheap=jheap.cli.app:cli"],
    },
)
