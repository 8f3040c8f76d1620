from common.exporter import Exporter, GaugeFamily
from common.fetcher import Fetcher
from mx.config import Settings
from mx.schemas import MexicoCase

NAMESPACE = 'covid19MX'
LABEL_NAMES = (
    'state',
    'sex',
    'date_sintoms_started',
    'arrived_from',
    'entry_to_mx_date',
)
FAMILIES = (
    GaugeFamily('case_id', 'caseID', 'CaseID'),
    GaugeFamily('age', 'Age', 'Person Age'),
)

TITLE = 'Covid19 Mexico only data Prometheus Exporter'
LANDING_PAGE = f"""<html>
<head><title>{TITLE}</title></head>
<body>
<h2>Covid19 Mexico only data - Prometheus Exporter</h2>
<p><a href='/metrics'>Metrics</a></p>
</body>
</html>
"""


def build_exporter(settings: Settings, fetcher: Fetcher) -> Exporter[MexicoCase]:
    return Exporter(
        namespace=NAMESPACE,
        label_names=LABEL_NAMES,
        families=FAMILIES,
        record_model=MexicoCase,
        fetcher=fetcher,
        stale_series_policy=settings.STALE_SERIES_POLICY,
        invalid_record_policy=settings.INVALID_RECORD_POLICY,
    )
