from .enrollment import Enrollment
from .address import Address
