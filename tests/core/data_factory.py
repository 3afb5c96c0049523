"""
Lightweight test data factory
Generates realistic invoice payloads in the API's field naming
"""

from typing import Dict, Any, List
from faker import Faker


class DataFactory:
    """Invoice payload generator with unique IDs per factory"""

    def __init__(self, seed: int = 1234, first_id: int = 900000):
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self._next_id = first_id
        self.created_ids: List[int] = []

    def next_id(self) -> int:
        invoice_id = self._next_id
        self._next_id += 1
        return invoice_id

    def generate_invoice(self, **overrides) -> Dict[str, Any]:
        """Generate a complete invoice payload"""
        invoice_id = overrides.pop("ID", None) or self.next_id()
        self.created_ids.append(invoice_id)

        data = {
            "ID": invoice_id,
            "BillNo": f"B{self.fake.random_int(min=1000, max=9999)}",
            "SlipNo": f"S{self.fake.random_int(min=1000, max=9999)}",
            "CustomerID": f"C{self.fake.random_int(min=100, max=999)}",
            "CustomerName": self.fake.company(),
            "Products": self.fake.catch_phrase(),
            "Number": float(self.fake.random_int(min=1, max=50)),
            "UnitPrice": float(self.fake.random_int(min=100, max=99999)) / 100,
            "Date": self.fake.date(pattern="%Y-%m-%d"),
        }
        data.update(overrides)
        return data
