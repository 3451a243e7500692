"""
PinPoint -- WPS Default PIN Predictor
======================================

Predicts the factory-default WPS PIN of a wireless access point from its
BSSID, for wireless-security auditing.

Vendors derive default PINs from the BSSID with small deterministic
formulas, occasionally ship one constant PIN, or assign PINs linearly
along the BSSID range.  PinPoint scores a catalog of known formulas
against nearby observed (BSSID, PIN) pairs, discovers constant and
linear patterns straight from the data, and ranks candidate PINs for the
target.

Modules:
    core.codec       -- BSSID / PIN formatting
    core.checksum    -- WPS check digit
    core.scoring     -- Neighbor scoring and pattern discovery
    core.aggregator  -- Normalisation and ranking
    core.engine      -- Orchestration engine
    core.models      -- Domain models
    generators       -- Vendor PIN generator catalog
    collectors       -- Neighbor dataset providers (SQLite, CSV, memory)
    output           -- Console and report output
    cli              -- Click-based command-line interface

References:
    - Wi-Fi Alliance. (2014). Wi-Fi Simple Configuration Technical
      Specification v2.0.5.
    - Heffner, C. (2014). Reversing D-Link's WPS Pin Algorithm.
      http://www.devttys0.com/2014/10/reversing-d-links-wps-pin-algorithm/
    - SEC Consult. (2013). Vodafone EasyBox Default WPS PIN
      Vulnerability.
"""

__version__ = "1.0.0"
__tool__ = "PinPoint"
__description__ = "WPS Default PIN Predictor"
