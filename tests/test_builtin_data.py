import pytest

from oiddb import BUILTIN_DATA_SETS, CRYPTO, X509, OIDRegistry, create_registry


@pytest.fixture(scope="module")
def registry() -> OIDRegistry:
    return create_registry()


def test_builtin_set_names() -> None:
    assert [ds.set_name for ds in BUILTIN_DATA_SETS] == ["crypto", "x509"]


@pytest.mark.parametrize("data_set", BUILTIN_DATA_SETS, ids=lambda ds: ds.set_name)
def test_builtin_oids_are_unique(data_set) -> None:
    oids = list(data_set.name_to_oid.values())
    assert len(oids) == len(set(oids))


@pytest.mark.parametrize("data_set", BUILTIN_DATA_SETS, ids=lambda ds: ds.set_name)
def test_builtin_targets_are_registered_names(data_set) -> None:
    for name in list(data_set.short_to_name.values()) + list(data_set.alias_to_name.values()):
        assert name in data_set.name_to_oid


def test_builtin_sets_do_not_overlap() -> None:
    assert not set(CRYPTO.name_to_oid) & set(X509.name_to_oid)
    assert not set(CRYPTO.name_to_oid.values()) & set(X509.name_to_oid.values())


def test_builtin_round_trip(registry: OIDRegistry) -> None:
    for data_set in BUILTIN_DATA_SETS:
        for name, oid in data_set.name_to_oid.items():
            assert registry.name_to_oid(name) == oid
            assert registry.oid_to_name(oid) == name


def test_curve_aliases(registry: OIDRegistry) -> None:
    assert registry.name_to_oid("P-256") == "1.2.840.10045.3.1.7"
    assert registry.alias_to_name("P-256") == "prime256v1"
    assert registry.name_to_oid("P-384") == "1.3.132.0.34"
    assert registry.alias_to_name("P-521") == "secp521r1"


def test_distinguished_name_short_forms(registry: OIDRegistry) -> None:
    assert registry.short_to_name("CN") == "commonName"
    assert registry.name_to_short("commonName") == "CN"
    assert registry.short_to_oid("C") == "2.5.4.6"
    assert registry.oid_to_short("2.5.4.6") == "C"
    assert registry.oid_to_short("0.9.2342.19200300.100.1.25") == "DC"


def test_attribute_without_short_form(registry: OIDRegistry) -> None:
    assert registry.name_to_short("organizationIdentifier") == "organizationIdentifier"
    assert registry.oid_to_short("2.5.4.97") == "organizationIdentifier"


def test_extension_names(registry: OIDRegistry) -> None:
    assert registry.oid_to_name("2.5.29.15") == "keyUsage"
    assert registry.name_to_oid("SAN") == "2.5.29.17"
    assert registry.oid_to_short("2.5.29.19") == "basicConstraints"
