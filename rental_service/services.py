# rental_service/services.py
from typing import List

from .errors import RentalServiceError, StorageError
from .filters import RentalFilters
from .repository import RentalRepository
from .schemas import Rental
from .utils import logger


class RentalFetching:
    """Fetching of single rentals and filtered rental listings."""

    def __init__(self, repository: RentalRepository):
        self.repository = repository

    def get_rental_by_id(self, rental_id: int) -> Rental:
        try:
            return self.repository.get_by_id(rental_id)
        except StorageError as e:
            logger.error("get_rental_by_id(%s) failed: %s", rental_id, e)
            raise e.wrap("operation get_rental_by_id") from e
        except RentalServiceError as e:
            raise e.wrap("operation get_rental_by_id") from e

    def list_rentals(self, filters: RentalFilters) -> List[Rental]:
        try:
            rentals = self.repository.list(filters)
        except StorageError as e:
            logger.error("list_rentals failed: %s", e)
            raise e.wrap("operation list_rentals") from e
        except RentalServiceError as e:
            raise e.wrap("operation list_rentals") from e
        logger.debug("list_rentals matched %d rentals", len(rentals))
        return rentals
