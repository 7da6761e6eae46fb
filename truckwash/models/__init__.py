# Truck wash ledger — Database Models
# Import all models here for SQLAlchemy discovery

from truckwash.models.wash_type import WashType             # noqa
from truckwash.models.location import Location              # noqa
from truckwash.models.company import Company                # noqa
from truckwash.models.vehicle import Vehicle                # noqa
from truckwash.models.wash import Wash                      # noqa
from truckwash.models.report import WashList, Invoice       # noqa
from truckwash.models.page_permission import PagePermission  # noqa
from truckwash.models.user import User                      # noqa
