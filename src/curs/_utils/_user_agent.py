from importlib.metadata import PackageNotFoundError, version


def user_agent_value() -> str:
    """Default User-Agent sent when the caller does not set one."""
    try:
        package_version = version("curs")
    except PackageNotFoundError:
        package_version = "0.0.0"
    return f"curs/{package_version}"
