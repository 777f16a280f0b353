import unittest

from hotel_client.models.drafts import BookingDraft
from hotel_client.services.draft_store import DraftStore
from hotel_client.utils.custom_exceptions import NotFoundException


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestDraftStore(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.store = DraftStore(ttl_seconds=60, clock=self.clock)
        self.draft = BookingDraft(hotel_id="H1", room_type="deluxe", base_price=2500)

    def test_create_and_get(self):
        flow_id = self.store.create(self.draft)
        self.assertIs(self.store.get(flow_id), self.draft)
        self.assertEqual(len(self.store), 1)

    def test_flow_ids_are_unique(self):
        first = self.store.create(self.draft)
        second = self.store.create(BookingDraft("H2", "suite", 4000))
        self.assertNotEqual(first, second)
        self.assertEqual(self.store.get(second).hotel_id, "H2")

    def test_unknown_flow(self):
        with self.assertRaises(NotFoundException):
            self.store.get("missing")

    def test_expired_flow(self):
        flow_id = self.store.create(self.draft)
        self.clock.now += 61
        with self.assertRaises(NotFoundException):
            self.store.get(flow_id)
        self.assertEqual(len(self.store), 0)

    def test_get_refreshes_ttl(self):
        flow_id = self.store.create(self.draft)
        self.clock.now += 50
        self.store.get(flow_id)
        self.clock.now += 50
        self.assertIs(self.store.get(flow_id), self.draft)

    def test_discard(self):
        flow_id = self.store.create(self.draft)
        self.store.discard(flow_id)
        self.store.discard(flow_id)
        with self.assertRaises(NotFoundException):
            self.store.get(flow_id)

    def test_purge_expired(self):
        self.store.create(self.draft)
        self.clock.now += 30
        kept = self.store.create(BookingDraft("H2", "suite", 4000))
        self.clock.now += 40
        self.assertEqual(self.store.purge_expired(), 1)
        self.assertEqual(len(self.store), 1)
        self.store.get(kept)


if __name__ == "__main__":
    unittest.main()
