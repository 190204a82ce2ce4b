"""Shared fixtures for sample metadata tests."""

import logging

import pytest

TARA_SAMPLE_XML = """
<?xml version="1.0" encoding="UTF-8"?>
<SAMPLE alias="TARA_N000002741" center_name="Genoscope" accession="ERS494529">
     <IDENTIFIERS>
          <PRIMARY_ID>ERS494529</PRIMARY_ID>
          <EXTERNAL_ID namespace="BioSample">SAMEA2623861</EXTERNAL_ID>
          <SUBMITTER_ID namespace="GSC">TARA_N000002741</SUBMITTER_ID>
     </IDENTIFIERS>
     <TITLE>TARA_20120309T0859Z_151_EVENT_PUMP_P_S_(5 m)_PROT_NUC-RNA(100L)_W0.8-5_TARA_N000002741</TITLE>
     <SAMPLE_NAME>
          <TAXON_ID>408172</TAXON_ID>
          <SCIENTIFIC_NAME>marine metagenome</SCIENTIFIC_NAME>
     </SAMPLE_NAME>
     <SAMPLE_LINKS>
          <SAMPLE_LINK>
               <XREF_LINK>
                    <DB>ENA-RUN</DB>
                    <ID>ERR598950, ERR599095</ID>
               </XREF_LINK>
          </SAMPLE_LINK>
          <SAMPLE_LINK>
               <XREF_LINK>
                    <DB>ENA-EXPERIMENT</DB>
                    <ID>ERX555933</ID>
               </XREF_LINK>
          </SAMPLE_LINK>
     </SAMPLE_LINKS>
     <SAMPLE_ATTRIBUTES>
          <SAMPLE_ATTRIBUTE>
               <TAG>Event Date/Time</TAG>
               <VALUE>2012-03-09T08:59</VALUE>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>Depth</TAG>
               <VALUE>5</VALUE>
               <UNITS>m</UNITS>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>Latitude Start</TAG>
               <VALUE>-22.1403</VALUE>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>Longitude Start</TAG>
               <VALUE>-40.1497</VALUE>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>Marine Region</TAG>
               <VALUE>(SAO) South Atlantic Ocean</VALUE>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>ENA-SPOT-COUNT</TAG>
               <VALUE>34210</VALUE>
          </SAMPLE_ATTRIBUTE>
          <SAMPLE_ATTRIBUTE>
               <TAG>Comment</TAG>
          </SAMPLE_ATTRIBUTE>
     </SAMPLE_ATTRIBUTES>
</SAMPLE>
"""

NO_ID_XML = """
<?xml version="1.0" encoding="UTF-8"?>
<SAMPLE alias="TARA_N000002741" center_name="Genoscope" accession="ERS494529">
     <IDENTIFIERS>
          <EXTERNAL_ID namespace="BioSample">SAMEA2623861</EXTERNAL_ID>
          <SUBMITTER_ID namespace="GSC">TARA_N000002741</SUBMITTER_ID>
     </IDENTIFIERS>
</SAMPLE>
"""

NO_ATTRIBUTES_XML = """
<?xml version="1.0" encoding="UTF-8"?>
<SAMPLE alias="TARA_N000002741" center_name="Genoscope" accession="ERS494529">
     <IDENTIFIERS>
          <PRIMARY_ID>ERS494529</PRIMARY_ID>
     </IDENTIFIERS>
     <SAMPLE_NAME>
          <TAXON_ID>408172</TAXON_ID>
          <SCIENTIFIC_NAME>marine metagenome</SCIENTIFIC_NAME>
     </SAMPLE_NAME>
</SAMPLE>
"""


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def tara_xml():
    return TARA_SAMPLE_XML


@pytest.fixture
def no_id_xml():
    return NO_ID_XML


@pytest.fixture
def no_attributes_xml():
    return NO_ATTRIBUTES_XML
