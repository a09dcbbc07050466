"""
Tests for the install flow orchestration.

All collaborators are fakes; no network or subprocess activity happens here.
"""

from pathlib import Path

import pytest

from liquibase_setup.core.exceptions import (
    AcquisitionFailed,
    InstallationValidationFailed,
    InvalidEditionError,
    InvalidVersionFormat,
    MissingLicenseKey,
    UnsupportedVersion,
)
from liquibase_setup.install.configurator import PROPERTIES_FILENAME
from liquibase_setup.install.installer import Installer
from liquibase_setup.install.models import Edition, InstallRequest
from liquibase_setup.install.urls import UrlResolver, resolve_download_url
from tests.mocks import FakeProcessRunner

OSS_UNIX_URL = (
    "https://package.liquibase.com/downloads/cli/liquibase/releases/download/"
    "v4.32.0/liquibase-4.32.0.tar.gz"
)


@pytest.fixture
def make_installer(fake_cache, fake_acquirer, fake_search_path, fake_runner, linux_platform):
    """Build an Installer wired to the shared fakes."""

    def _make(platform=linux_platform, runner=fake_runner, url_resolver=None):
        return Installer(
            cache=fake_cache,
            acquirer=fake_acquirer,
            search_path=fake_search_path,
            runner=runner,
            platform=platform,
            url_resolver=url_resolver,
        )

    return _make


class TestFreshInstall:
    """Tests for installs with an empty cache."""

    def test_oss_linux_fresh_install(
        self, make_installer, fake_cache, fake_acquirer, fake_search_path, fake_runner
    ):
        """Test a cache miss downloads, extracts, stores and validates once."""
        result = make_installer().install(InstallRequest("4.32.0", Edition.OSS))

        assert fake_acquirer.download_calls == [OSS_UNIX_URL]
        assert len(fake_acquirer.tar_gz_calls) == 1
        assert fake_acquirer.zip_calls == []
        assert len(fake_cache.store_calls) == 1
        assert fake_cache.store_calls[0][1:] == ("liquibase-oss", "4.32.0")
        assert len(fake_runner.calls) == 1

        cached = fake_cache.root / "liquibase-oss" / "4.32.0"
        assert result.version == "4.32.0"
        assert result.path == cached
        assert fake_search_path.directories == [cached]

    def test_windows_uses_zip(
        self, make_installer, fake_acquirer, fake_runner, windows_platform
    ):
        """Test Windows downloads the zip and validates the .bat wrapper."""
        make_installer(platform=windows_platform).install(
            InstallRequest("4.32.0", Edition.OSS)
        )

        assert fake_acquirer.download_calls == [
            resolve_download_url("4.32.0", Edition.OSS, windows_platform)
        ]
        assert len(fake_acquirer.zip_calls) == 1
        assert fake_acquirer.tar_gz_calls == []
        assert fake_runner.calls[0][0].endswith("liquibase.bat")

    def test_pro_fresh_install_writes_license(
        self, make_installer, fake_acquirer, linux_platform
    ):
        """Test a Pro install downloads the Pro archive and writes the key."""
        result = make_installer().install(
            InstallRequest("4.32.0", Edition.PRO, license_key="PRO-KEY")
        )

        assert fake_acquirer.download_calls == [
            resolve_download_url("4.32.0", Edition.PRO, linux_platform)
        ]
        assert result.path.name == "4.32.0"
        assert result.path.parent.name == "liquibase-pro"
        assert (result.path / PROPERTIES_FILENAME).read_text() == (
            "liquibase.licenseKey=PRO-KEY\n"
        )

    def test_oss_writes_no_properties_file(self, make_installer):
        """Test OSS installs never create liquibase.properties."""
        result = make_installer().install(InstallRequest("4.32.0", Edition.OSS))

        assert not (result.path / PROPERTIES_FILENAME).exists()

    def test_edition_given_as_string(self, make_installer, fake_cache):
        """Test the edition may be passed by name."""
        make_installer().install(InstallRequest("4.32.0", "PRO", license_key="KEY"))

        assert fake_cache.find_calls == [("liquibase-pro", "4.32.0")]

    def test_url_override(self, make_installer, fake_acquirer):
        """Test a configured mirror replaces the default URL."""
        resolver = UrlResolver({"oss_unix": "https://mirror.example.com/{version}.tgz"})

        make_installer(url_resolver=resolver).install(InstallRequest("4.32.0"))

        assert fake_acquirer.download_calls == ["https://mirror.example.com/4.32.0.tgz"]


class TestCachedInstall:
    """Tests for installs that hit the cache."""

    def test_cache_hit_skips_acquisition(
        self, make_installer, fake_cache, fake_acquirer, fake_search_path, fake_runner
    ):
        """Test a hit performs no download and still validates."""
        entry = fake_cache.seed("liquibase-oss", "4.32.0")

        result = make_installer().install(InstallRequest("4.32.0", Edition.OSS))

        assert fake_acquirer.call_count == 0
        assert fake_cache.store_calls == []
        assert result.path == entry
        assert fake_search_path.directories == [entry]
        assert len(fake_runner.calls) == 1

    def test_editions_do_not_share_entries(
        self, make_installer, fake_cache, fake_acquirer
    ):
        """Test a cached OSS entry does not satisfy a Pro request."""
        fake_cache.seed("liquibase-oss", "4.32.0")

        make_installer().install(InstallRequest("4.32.0", Edition.PRO, license_key="K"))

        assert len(fake_acquirer.download_calls) == 1
        assert fake_cache.store_calls[0][1] == "liquibase-pro"

    def test_cache_disabled_always_acquires(
        self, make_installer, fake_cache, fake_acquirer, fake_search_path
    ):
        """Test use_cache=False ignores a hit and never stores."""
        entry = fake_cache.seed("liquibase-oss", "4.32.0")

        result = make_installer().install(InstallRequest("4.32.0", use_cache=False))

        assert len(fake_acquirer.download_calls) == 1
        assert fake_cache.store_calls == []
        assert result.path != entry
        assert result.path.parent == fake_acquirer.work_dir
        assert fake_search_path.directories == [result.path]

    def test_second_run_reuses_first(self, make_installer, fake_acquirer):
        """Test consecutive runs for the same request download once."""
        installer = make_installer()

        first = installer.install(InstallRequest("4.32.0"))
        second = installer.install(InstallRequest("4.32.0"))

        assert first.path == second.path
        assert len(fake_acquirer.download_calls) == 1


class TestValidationFailures:
    """Tests that invalid requests fail before any side effect."""

    @pytest.mark.parametrize("version", ["latest", "4.32", "v4.32.0", ""])
    def test_invalid_version_format(
        self, make_installer, fake_cache, fake_acquirer, fake_search_path, version
    ):
        """Test malformed versions fail with no lookup or download."""
        with pytest.raises(InvalidVersionFormat):
            make_installer().install(InstallRequest(version))

        assert fake_cache.find_calls == []
        assert fake_acquirer.call_count == 0
        assert fake_search_path.directories == []

    def test_unsupported_version(self, make_installer, fake_cache, fake_acquirer):
        """Test versions below the floor fail with no download."""
        with pytest.raises(UnsupportedVersion) as exc_info:
            make_installer().install(InstallRequest("4.20.0"))

        assert str(exc_info.value) == (
            "Version 4.20.0 is not supported. Minimum supported version is 4.32.0"
        )
        assert fake_cache.find_calls == []
        assert fake_acquirer.call_count == 0

    @pytest.mark.parametrize("license_key", [None, "", "  "])
    def test_pro_without_license_key(
        self, make_installer, fake_cache, fake_acquirer, license_key
    ):
        """Test Pro without a key fails before any work."""
        with pytest.raises(MissingLicenseKey):
            make_installer().install(
                InstallRequest("4.32.0", Edition.PRO, license_key=license_key)
            )

        assert fake_cache.find_calls == []
        assert fake_acquirer.call_count == 0

    def test_invalid_edition(self, make_installer, fake_acquirer):
        """Test unknown editions are rejected."""
        with pytest.raises(InvalidEditionError):
            make_installer().install(InstallRequest("4.32.0", "enterprise"))

        assert fake_acquirer.call_count == 0


class TestAcquisitionFailures:
    """Tests for download and extraction failures."""

    def test_download_failure(
        self, make_installer, fake_acquirer, fake_cache, fake_search_path
    ):
        """Test download errors surface as AcquisitionFailed with the cause."""
        cause = ConnectionError("connection reset")
        fake_acquirer.download_error = cause

        with pytest.raises(AcquisitionFailed) as exc_info:
            make_installer().install(InstallRequest("4.32.0"))

        assert exc_info.value.url == OSS_UNIX_URL
        assert exc_info.value.cause is cause
        assert fake_cache.store_calls == []
        assert fake_search_path.directories == []

    def test_extraction_failure(self, make_installer, fake_acquirer, fake_cache):
        """Test extraction errors surface as AcquisitionFailed."""
        cause = OSError("corrupt archive")
        fake_acquirer.extract_error = cause

        with pytest.raises(AcquisitionFailed) as exc_info:
            make_installer().install(InstallRequest("4.32.0"))

        assert exc_info.value.cause is cause
        assert fake_cache.store_calls == []


class TestValidationRun:
    """Tests for the post-install executable check."""

    def test_validation_failure_after_publishing(
        self, make_installer, fake_search_path
    ):
        """Test a failing executable raises after the path was published."""
        installer = make_installer(runner=FakeProcessRunner(exit_code=2))

        with pytest.raises(InstallationValidationFailed):
            installer.install(InstallRequest("4.32.0"))

        assert len(fake_search_path.directories) == 1

    def test_cached_installation_is_revalidated(self, make_installer, fake_cache):
        """Test a broken cached entry is reported, not trusted."""
        fake_cache.seed("liquibase-oss", "4.32.0")
        installer = make_installer(runner=FakeProcessRunner(error=PermissionError("denied")))

        with pytest.raises(InstallationValidationFailed):
            installer.install(InstallRequest("4.32.0"))

    def test_pro_license_written_before_validation(self, make_installer, fake_runner):
        """Test the validation run already sees the configured license."""
        make_installer().install(
            InstallRequest("4.32.0", Edition.PRO, license_key="PRO-KEY")
        )

        assert fake_runner.properties_seen == [True]

    def test_oss_validated_without_properties(self, make_installer, fake_runner):
        """Test OSS validation runs with no properties file present."""
        make_installer().install(InstallRequest("4.32.0", Edition.OSS))

        assert fake_runner.properties_seen == [False]

    def test_pro_cache_hit_configures_cached_entry(
        self, make_installer, fake_cache, fake_acquirer, fake_runner
    ):
        """Test a cached Pro entry gets the license key before validation."""
        entry = fake_cache.seed("liquibase-pro", "4.32.0")

        result = make_installer().install(
            InstallRequest("4.32.0", Edition.PRO, license_key="PRO-KEY")
        )

        assert result.path == entry
        assert fake_acquirer.call_count == 0
        assert (entry / PROPERTIES_FILENAME).read_text() == (
            "liquibase.licenseKey=PRO-KEY\n"
        )
        assert fake_runner.properties_seen == [True]

    def test_validation_runs_version_flag(self, make_installer, fake_runner):
        """Test validation runs the installed binary with --version."""
        result = make_installer().install(InstallRequest("4.32.0"))

        assert fake_runner.calls == [(str(Path(result.path) / "liquibase"), ["--version"], True)]
