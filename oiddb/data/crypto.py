"""Common cryptographic algorithm and parameter identifiers.

Hash, MAC, signature, public-key and content-encryption algorithms plus the
named elliptic curves, with the NIST and informal curve aliases.
"""
from oiddb.core.data_set import DataSet

CRYPTO = DataSet(
    set_name="crypto",
    name_to_oid={
        # hash functions
        "md2": "1.2.840.113549.2.2",
        "md5": "1.2.840.113549.2.5",
        "sha1": "1.3.14.3.2.26",
        "sha224": "2.16.840.1.101.3.4.2.4",
        "sha256": "2.16.840.1.101.3.4.2.1",
        "sha384": "2.16.840.1.101.3.4.2.2",
        "sha512": "2.16.840.1.101.3.4.2.3",
        "sha512-224": "2.16.840.1.101.3.4.2.5",
        "sha512-256": "2.16.840.1.101.3.4.2.6",
        "sha3-224": "2.16.840.1.101.3.4.2.7",
        "sha3-256": "2.16.840.1.101.3.4.2.8",
        "sha3-384": "2.16.840.1.101.3.4.2.9",
        "sha3-512": "2.16.840.1.101.3.4.2.10",
        "shake128": "2.16.840.1.101.3.4.2.11",
        "shake256": "2.16.840.1.101.3.4.2.12",
        "ripemd160": "1.3.36.3.2.1",
        # MACs
        "hmacWithSHA1": "1.2.840.113549.2.7",
        "hmacWithSHA224": "1.2.840.113549.2.8",
        "hmacWithSHA256": "1.2.840.113549.2.9",
        "hmacWithSHA384": "1.2.840.113549.2.10",
        "hmacWithSHA512": "1.2.840.113549.2.11",
        # RSA
        "rsaEncryption": "1.2.840.113549.1.1.1",
        "md2WithRSAEncryption": "1.2.840.113549.1.1.2",
        "md5WithRSAEncryption": "1.2.840.113549.1.1.4",
        "sha1WithRSAEncryption": "1.2.840.113549.1.1.5",
        "rsaesOaep": "1.2.840.113549.1.1.7",
        "mgf1": "1.2.840.113549.1.1.8",
        "rsassaPss": "1.2.840.113549.1.1.10",
        "sha256WithRSAEncryption": "1.2.840.113549.1.1.11",
        "sha384WithRSAEncryption": "1.2.840.113549.1.1.12",
        "sha512WithRSAEncryption": "1.2.840.113549.1.1.13",
        "sha224WithRSAEncryption": "1.2.840.113549.1.1.14",
        # DSA and Diffie-Hellman
        "dsa": "1.2.840.10040.4.1",
        "dsaWithSHA1": "1.2.840.10040.4.3",
        "dsaWithSHA224": "2.16.840.1.101.3.4.3.1",
        "dsaWithSHA256": "2.16.840.1.101.3.4.3.2",
        "dhpublicnumber": "1.2.840.10046.2.1",
        # elliptic curve keys and signatures
        "ecPublicKey": "1.2.840.10045.2.1",
        "ecdsaWithSHA1": "1.2.840.10045.4.1",
        "ecdsaWithSHA224": "1.2.840.10045.4.3.1",
        "ecdsaWithSHA256": "1.2.840.10045.4.3.2",
        "ecdsaWithSHA384": "1.2.840.10045.4.3.3",
        "ecdsaWithSHA512": "1.2.840.10045.4.3.4",
        "Ed25519": "1.3.101.112",
        "Ed448": "1.3.101.113",
        "X25519": "1.3.101.110",
        "X448": "1.3.101.111",
        # named curves
        "prime192v1": "1.2.840.10045.3.1.1",
        "prime256v1": "1.2.840.10045.3.1.7",
        "secp224r1": "1.3.132.0.33",
        "secp384r1": "1.3.132.0.34",
        "secp521r1": "1.3.132.0.35",
        "secp256k1": "1.3.132.0.10",
        "brainpoolP256r1": "1.3.36.3.3.2.8.1.1.7",
        "brainpoolP384r1": "1.3.36.3.3.2.8.1.1.11",
        "brainpoolP512r1": "1.3.36.3.3.2.8.1.1.13",
        # content encryption
        "des-EDE3-CBC": "1.2.840.113549.3.7",
        "aes128-CBC": "2.16.840.1.101.3.4.1.2",
        "aes128-GCM": "2.16.840.1.101.3.4.1.6",
        "aes192-CBC": "2.16.840.1.101.3.4.1.22",
        "aes192-GCM": "2.16.840.1.101.3.4.1.26",
        "aes256-CBC": "2.16.840.1.101.3.4.1.42",
        "aes256-GCM": "2.16.840.1.101.3.4.1.46",
        # PKCS#5
        "pbkdf2": "1.2.840.113549.1.5.12",
        "pbes2": "1.2.840.113549.1.5.13",
    },
    alias_to_name={
        "P-192": "prime192v1",
        "secp192r1": "prime192v1",
        "P-224": "secp224r1",
        "P-256": "prime256v1",
        "secp256r1": "prime256v1",
        "P-384": "secp384r1",
        "P-521": "secp521r1",
        "SHA1withRSA": "sha1WithRSAEncryption",
        "SHA256withRSA": "sha256WithRSAEncryption",
        "SHA384withRSA": "sha384WithRSAEncryption",
        "SHA512withRSA": "sha512WithRSAEncryption",
        "SHA256withECDSA": "ecdsaWithSHA256",
        "SHA384withECDSA": "ecdsaWithSHA384",
        "SHA512withECDSA": "ecdsaWithSHA512",
    },
)
