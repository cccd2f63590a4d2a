from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="jira-api-client",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="A thin client for the Jira REST API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/jira-api-client",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=0.19.0",
        "rich>=10.0.0",
        "typer>=0.4.0",
        "requests>=2.31.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "jira-api=jira_api_client.cli:app",
        ],
    },
)
