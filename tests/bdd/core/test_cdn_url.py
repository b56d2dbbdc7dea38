"""Step definitions for Electron download URL feature."""

import pytest
from pytest_bdd import scenario, given, when, then, parsers

from electron_installer.adapters.fakes import FakePlatformDetector
from electron_installer.domain.exceptions import UnsupportedPlatformError
from electron_installer.factories import resolve_settings
from electron_installer.usecases.cdn_url_builder import CdnUrlBuilder


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CdnUrlBuilder")
@scenario(
    "../../features/core/cdn_url.feature",
    "Default download comes from GitHub releases",
)
def test_default_github_url():
    """Test the default URL points at GitHub releases."""
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CdnUrlBuilder")
@scenario(
    "../../features/core/cdn_url.feature",
    "Mirror URL without trailing slash gets one",
)
def test_mirror_trailing_slash():
    """Test a missing trailing slash is added."""
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CdnUrlBuilder")
@scenario(
    "../../features/core/cdn_url.feature",
    "Environment CDN URL wins over the server variable",
)
def test_environment_cdn_wins():
    """Test ELECTRON_CDNURL in the environment takes precedence."""
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CdnUrlBuilder")
@scenario(
    "../../features/core/cdn_url.feature",
    "Release URL on GitHub is not rewritten again",
)
def test_release_url_not_rewritten():
    """Test a GitHub release URL is kept as is."""
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CdnUrlBuilder")
@scenario(
    "../../features/core/cdn_url.feature",
    "Unsupported platform is rejected",
)
def test_unsupported_platform():
    """Test an undetectable platform raises."""
    pass


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def environ() -> dict:
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------


@given(parsers.parse('the platform is "{os_name}" on "{arch}"'))
def platform_is(context: dict, os_name: str, arch: str):
    """Report a fixed platform."""
    context["platform"] = FakePlatformDetector(os=os_name, arch=arch)


@given("the platform can not be detected")
def platform_undetectable(context: dict):
    """Report no known OS."""
    context["platform"] = FakePlatformDetector(os=None, arch="x64")


@given(parsers.parse('the CDN URL is "{url}"'))
def cdn_in_extra(host_kwargs: dict, url: str):
    """Configure the CDN URL in the project's extra block."""
    host_kwargs["extra"]["cdnurl"] = url


@given(parsers.parse('the CDN URL is "{url}" in the environment'))
def cdn_in_environment(environ: dict, url: str):
    """Configure the CDN URL in the environment."""
    environ["ELECTRON_CDNURL"] = url


@given(parsers.parse('the CDN URL is "{url}" in the server context'))
def cdn_in_server_context(host_kwargs: dict, url: str):
    """Configure the CDN URL as a server variable."""
    host_kwargs["server_vars"]["ELECTRON_CDNURL"] = url


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------


@when(parsers.parse('I build the download URL for version "{version}"'))
def build_url(context: dict, make_host, environ: dict, version: str):
    """Build the archive URL."""
    settings = resolve_settings(make_host(), environ)
    builder = CdnUrlBuilder(settings, context["platform"])
    try:
        context["url"] = builder.artifact_url(version)
        context["error"] = None
    except UnsupportedPlatformError as e:
        context["url"] = None
        context["error"] = e


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------


@then(parsers.parse('the URL should be "{url}"'))
def url_is(context: dict, url: str):
    """Assert the built URL."""
    assert context["error"] is None, f"Unexpected error: {context['error']}"
    assert context["url"] == url


@then("an UnsupportedPlatformError should be raised")
def unsupported_platform_raised(context: dict):
    """Assert that UnsupportedPlatformError was raised."""
    assert isinstance(context["error"], UnsupportedPlatformError)
