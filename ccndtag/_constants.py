"""ccnb DTAG constants and the embedded tag table.

Each standard element of the ccnb encoding gets a numeric DTAG.  The codes
below are the CCNx assignments; DTAG_ENTRIES is the literal table the shared
dictionary is built from.
"""

from __future__ import annotations

from typing import Tuple

__table_version__ = "2009.1"

# ── DTAG codes ────────────────────────────────────────────────
# 14..56 are contiguous.  Nothing below 14 is assigned.

DTAG_Name: int = 14
DTAG_Component: int = 15
DTAG_Certificate: int = 16
DTAG_Collection: int = 17
DTAG_CompleteName: int = 18
DTAG_Content: int = 19
DTAG_ContentAuthenticator: int = 20
DTAG_ContentDigest: int = 21
DTAG_ContentHash: int = 22
DTAG_ContentObject: int = 23
DTAG_Count: int = 24
DTAG_Header: int = 25
DTAG_Interest: int = 26
DTAG_Key: int = 27
DTAG_KeyLocator: int = 28
DTAG_KeyName: int = 29
DTAG_Length: int = 30
DTAG_Link: int = 31
DTAG_LinkAuthenticator: int = 32
DTAG_NameComponentCount: int = 33
DTAG_PublisherID: int = 34
DTAG_PublisherKeyID: int = 35
DTAG_RootDigest: int = 36
DTAG_Signature: int = 37
DTAG_Start: int = 38
DTAG_Timestamp: int = 39
DTAG_Type: int = 40
DTAG_Nonce: int = 41
DTAG_Scope: int = 42
DTAG_Exclude: int = 43
DTAG_Bloom: int = 44
DTAG_BloomSeed: int = 45
DTAG_OrderPreference: int = 46
DTAG_AnswerOriginKind: int = 47
DTAG_MatchFirstAvailableDescendant: int = 48
DTAG_MatchLastAvailableDescendant: int = 49
DTAG_MatchNextAvailableSibling: int = 50
DTAG_MatchLastAvailableSibling: int = 51
DTAG_MatchEntirePrefix: int = 52
DTAG_Witness: int = 53
DTAG_SignatureBits: int = 54
DTAG_DigestAlgorithm: int = 55
DTAG_ExperimentalResponseFilter: int = 56

# Outer wrapper for a stream of ccnb objects, well outside the small codes.
DTAG_CCNProtocolDataUnit: int = 17702112

# ── The table ─────────────────────────────────────────────────
# Order is the historical table order, not sorted by code.  Names use
# ASCII letters only; they double as element names in XML renderings.

DTAG_ENTRIES: Tuple[Tuple[int, str], ...] = (
    (DTAG_Name, "Name"),
    (DTAG_Component, "Component"),
    (DTAG_Certificate, "Certificate"),
    (DTAG_Collection, "Collection"),
    (DTAG_CompleteName, "CompleteName"),
    (DTAG_Content, "Content"),
    (DTAG_ContentAuthenticator, "ContentAuthenticator"),
    (DTAG_ContentDigest, "ContentDigest"),
    (DTAG_ContentHash, "ContentHash"),
    (DTAG_ContentObject, "ContentObject"),
    (DTAG_Count, "Count"),
    (DTAG_Header, "Header"),
    (DTAG_Interest, "Interest"),
    (DTAG_Key, "Key"),
    (DTAG_KeyLocator, "KeyLocator"),
    (DTAG_KeyName, "KeyName"),
    (DTAG_Length, "Length"),
    (DTAG_Link, "Link"),
    (DTAG_LinkAuthenticator, "LinkAuthenticator"),
    (DTAG_NameComponentCount, "NameComponentCount"),
    (DTAG_PublisherID, "PublisherID"),
    (DTAG_PublisherKeyID, "PublisherKeyID"),
    (DTAG_RootDigest, "RootDigest"),
    (DTAG_Signature, "Signature"),
    (DTAG_Start, "Start"),
    (DTAG_Timestamp, "Timestamp"),
    (DTAG_Type, "Type"),
    (DTAG_Nonce, "Nonce"),
    (DTAG_Scope, "Scope"),
    (DTAG_Exclude, "Exclude"),
    (DTAG_Bloom, "Bloom"),
    (DTAG_BloomSeed, "BloomSeed"),
    (DTAG_OrderPreference, "OrderPreference"),
    (DTAG_AnswerOriginKind, "AnswerOriginKind"),
    (DTAG_MatchFirstAvailableDescendant, "MatchFirstAvailableDescendant"),
    (DTAG_MatchLastAvailableDescendant, "MatchLastAvailableDescendant"),
    (DTAG_MatchNextAvailableSibling, "MatchNextAvailableSibling"),
    (DTAG_MatchLastAvailableSibling, "MatchLastAvailableSibling"),
    (DTAG_MatchEntirePrefix, "MatchEntirePrefix"),
    (DTAG_Witness, "Witness"),
    (DTAG_SignatureBits, "SignatureBits"),
    (DTAG_DigestAlgorithm, "DigestAlgorithm"),
    (DTAG_CCNProtocolDataUnit, "CCNProtocolDataUnit"),
    (DTAG_ExperimentalResponseFilter, "ExperimentalResponseFilter"),
)

__all__ = [n for n in list(globals()) if n.startswith("DTAG_")]
