[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletledger"
version = "0.1.0"
description = "Wallets, transactions and exchange-rate records with in-memory and MariaDB/MySQL storage."
requires-python = ">=3.10"
dependencies = [
    "pymysql",
]
keywords = ["wallet", "transactions", "exchange rate", "ledger", "dao", "mysql", "mariadb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["walletledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
