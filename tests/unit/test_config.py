"""Tests for the configuration loader."""

import tempfile
from pathlib import Path

from static_site.config import Config, SiteConfig


def _load(yaml_content: str) -> Config:
  with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
    f.write(yaml_content)
    f.flush()

    return Config.from_yaml(Path(f.name))


class TestSiteConfig:
  """Test SiteConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify default values are set correctly."""
    config = SiteConfig(name="acme")

    assert config.name == "acme"
    assert config.domain_name is None
    assert config.site_sub_domain == "www"
    assert config.hosted_zone_id is None
    assert config.region == "us-east-1"
    assert config.owner is None
    assert config.email is None

  def test_site_domain(self) -> None:
    """Verify the site domain joins sub domain and domain."""
    config = SiteConfig(name="acme", domain_name="example.com", site_sub_domain="app")

    assert config.site_domain == "app.example.com"

  def test_site_domain_ignores_sub_domain_without_domain(self) -> None:
    """Verify no site domain exists without a domain name."""
    config = SiteConfig(name="acme", site_sub_domain="app")

    assert config.site_domain is None


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self) -> None:
    """Test loading a simple configuration."""
    config = _load(
      """
sites:
  - name: acme
    domain_name: example.com
    site_sub_domain: www
"""
    )

    assert len(config.sites) == 1
    assert config.sites[0].name == "acme"
    assert config.sites[0].domain_name == "example.com"
    assert config.sites[0].site_domain == "www.example.com"

  def test_load_site_without_domain(self) -> None:
    """Test a site that only uses the CloudFront domain."""
    config = _load(
      """
sites:
  - name: acme
"""
    )

    assert config.sites[0].domain_name is None
    assert config.sites[0].site_domain is None

  def test_load_with_defaults(self) -> None:
    """Test loading configuration with defaults."""
    config = _load(
      """
defaults:
  region: us-west-2
  owner: Test Owner
  site_sub_domain: app

sites:
  - name: acme
    domain_name: example.com
"""
    )

    assert config.sites[0].region == "us-west-2"
    assert config.sites[0].owner == "Test Owner"
    assert config.sites[0].site_domain == "app.example.com"

  def test_site_overrides_defaults(self) -> None:
    """Test that site-specific config overrides defaults."""
    config = _load(
      """
defaults:
  region: us-west-2

sites:
  - name: acme
    region: eu-west-1
"""
    )

    assert config.sites[0].region == "eu-west-1"

  def test_load_multiple_sites(self) -> None:
    """Test loading multiple sites."""
    config = _load(
      """
sites:
  - name: site-one
    domain_name: site1.com

  - name: site-two
"""
    )

    assert [site.name for site in config.sites] == ["site-one", "site-two"]
    assert config.sites[1].domain_name is None

  def test_hosted_zone_id(self) -> None:
    """Test hosted zone ID is loaded correctly."""
    config = _load(
      """
sites:
  - name: acme
    domain_name: example.com
    hosted_zone_id: Z1234567890
"""
    )

    assert config.sites[0].hosted_zone_id == "Z1234567890"

  def test_empty_file(self) -> None:
    """Test an empty file yields no sites."""
    assert _load("").sites == []
