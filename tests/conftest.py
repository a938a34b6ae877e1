import pytest

from kcgdeck.services.card_catalog import CardCatalog, parse_catalog_csv


@pytest.fixture
def sample_catalog_csv() -> str:
    """Small card list covering every kind."""
    return """id,name,kind,type,effect,tags
AA-1,Red Artist,Artist,赤,,artist
AA-2,Blue Artist,Artist,青,,artist
AA-10,Rainbow Artist,Artist,全,,artist
AS-1,Opening Song,Song,赤,Score +1,song
AS-12,Dawn Chorus,Song,白/黒,,song
AM-1,Spark,Magic,即時,,magic
AM-3,Star Mic,Magic,装備,,magic/equipment
AD-1,Buzzer,Direction,,,direction
BA-1,Torch Artist,Artist,赤,,artist
exA-1,Guest Artist,Artist,全,,artist/limited
"""


@pytest.fixture
def catalog(sample_catalog_csv: str) -> CardCatalog:
    return parse_catalog_csv(sample_catalog_csv)
