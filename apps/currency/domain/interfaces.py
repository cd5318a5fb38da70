from abc import ABC, abstractmethod


class BaseRateTableSource(ABC):
    @abstractmethod
    def get_rate_table_data(self) -> dict | None:
        pass
