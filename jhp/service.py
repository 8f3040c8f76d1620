from common.exporter import Exporter, GaugeFamily
from common.fetcher import Fetcher
from jhp.config import Settings
from jhp.schemas import JhuLocation

NAMESPACE = 'covid19JHP'
LABEL_NAMES = ('country', 'province', 'city', 'latitude', 'longitude')
FAMILIES = (
    GaugeFamily('confirmed', 'confirmed_cases', 'John Hopkins data confirmed cases'),
    GaugeFamily('deaths', 'deaths', 'John Hopkins data confirmed deaths'),
)

TITLE = 'Covid19 Data Prometheus Exporter from John Hopkins data'
LANDING_PAGE = f"""<html>
<head><title>{TITLE}</title></head>
<body>
<h2>Covid19 data Prometheus Exporter</h2>
<p><a href='/metrics'>Metrics</a></p>
</body>
</html>
"""


def build_exporter(settings: Settings, fetcher: Fetcher) -> Exporter[JhuLocation]:
    return Exporter(
        namespace=NAMESPACE,
        label_names=LABEL_NAMES,
        families=FAMILIES,
        record_model=JhuLocation,
        fetcher=fetcher,
        stale_series_policy=settings.STALE_SERIES_POLICY,
        invalid_record_policy=settings.INVALID_RECORD_POLICY,
    )
