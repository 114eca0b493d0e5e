"""Tests for deriving friend and friend request views."""

from __future__ import annotations

import unittest
from unittest.mock import patch

from naturecards import create_app
from naturecards.errors import NetworkError
from naturecards.gallery.services import fetch_user_document
from naturecards.social.services import SocialService
from tests.conftest import add_user, make_store


class FriendshipTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db, self.store = make_store()
        self.app = create_app({"TESTING": True, "USER_STORE": self.store})
        self.app_context = self.app.app_context()
        self.app_context.push()

        add_user(
            self.db,
            "u1",
            username="fern",
            friends=["u2", "u3"],
            pending_friends=[
                {"sending": "u4", "receiving": "u1"},
                {"sending": "u1", "receiving": "u5"},
                {"sending": "u6"},
                {"receiving": "u1"},
            ],
        )
        add_user(self.db, "u2", username="moss", profile_picture="https://img/moss.png")
        add_user(self.db, "u3", username="lichen")
        add_user(self.db, "u4", username="sedge")
        add_user(self.db, "u5", username="bracken")

    def tearDown(self) -> None:
        self.app_context.pop()

    def current(self):
        return fetch_user_document(self.store, "u1")

    def test_derive_friend_list(self) -> None:
        friends = SocialService.derive_friend_list(self.store, self.current())
        self.assertEqual(
            friends,
            [
                {
                    "id": "u2",
                    "username": "moss",
                    "profile_image": "https://img/moss.png",
                    "gallery_url": "/gallery?userid=u2",
                },
                {
                    "id": "u3",
                    "username": "lichen",
                    "profile_image": "/default-avatar.png",
                    "gallery_url": "/gallery?userid=u3",
                },
            ],
        )

    def test_derive_friend_list_drops_missing_friends(self) -> None:
        doc = self.current()
        doc["friends"] = ["u2", "ghost"]
        friends = SocialService.derive_friend_list(self.store, doc)
        self.assertEqual([f["id"] for f in friends], ["u2"])

    def test_derive_friend_list_survives_store_errors(self) -> None:
        original = self.store.get_user

        def flaky(user_id):
            if user_id == "u3":
                raise NetworkError("timeout")
            return original(user_id)

        with patch.object(self.store, "get_user", side_effect=flaky):
            friends = SocialService.derive_friend_list(self.store, self.current())
        self.assertEqual([f["id"] for f in friends], ["u2"])

    def test_derive_friend_list_empty(self) -> None:
        doc = self.current()
        doc["friends"] = []
        self.assertEqual(SocialService.derive_friend_list(self.store, doc), [])

    def test_derive_friend_request_list(self) -> None:
        requests = SocialService.derive_friend_request_list(self.store, self.current())
        self.assertEqual(len(requests), 2)

        incoming, outgoing = requests
        self.assertEqual(incoming["id"], "u4:u1")
        self.assertEqual(incoming["sender_id"], "u4")
        self.assertEqual(incoming["recipient_id"], "u1")
        self.assertEqual(incoming["username"], "sedge")
        self.assertEqual(incoming["profile_image"], "/default-avatar.png")
        self.assertTrue(incoming["incoming"])

        self.assertEqual(outgoing["id"], "u1:u5")
        self.assertEqual(outgoing["username"], "bracken")
        self.assertEqual(outgoing["sending"], "u1")
        self.assertEqual(outgoing["receiving"], "u5")
        self.assertFalse(outgoing["incoming"])

    def test_derive_friend_request_list_drops_unfetchable_entries(self) -> None:
        doc = self.current()
        doc["pending_friends"].append({"sending": "ghost", "receiving": "u1"})
        requests = SocialService.derive_friend_request_list(self.store, doc)
        self.assertEqual([r["id"] for r in requests], ["u4:u1", "u1:u5"])

    def test_malformed_requests_are_skipped_without_raising(self) -> None:
        doc = self.current()
        doc["pending_friends"] = [{"sending": "u4"}, None, {"receiving": "u1"}]
        self.assertEqual(SocialService.derive_friend_request_list(self.store, doc), [])

    def test_derive_trade_request_list_is_verbatim(self) -> None:
        trade = {"offeredCard": {"id": "c1"}, "requestedCard": {"id": "c2"}}
        doc = self.current()
        doc["trading"] = [trade]
        self.assertEqual(SocialService.derive_trade_request_list(doc), [trade])


class FriendshipStatusTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.doc = {
            "id": "a",
            "friends": ["b"],
            "pending_friends": [
                {"sending": "a", "receiving": "c"},
                {"sending": "d", "receiving": "a"},
            ],
        }

    def test_friend(self) -> None:
        self.assertEqual(SocialService.check_friendship_status(self.doc, "b"), "friend")

    def test_pending_outgoing(self) -> None:
        self.assertEqual(
            SocialService.check_friendship_status(self.doc, "c"), "pending_outgoing"
        )

    def test_pending_incoming(self) -> None:
        self.assertEqual(
            SocialService.check_friendship_status(self.doc, "d"), "pending_incoming"
        )

    def test_none(self) -> None:
        self.assertEqual(SocialService.check_friendship_status(self.doc, "e"), "none")

    def test_friend_wins_over_pending(self) -> None:
        self.doc["pending_friends"].append({"sending": "b", "receiving": "a"})
        self.assertEqual(SocialService.check_friendship_status(self.doc, "b"), "friend")

    def test_outgoing_wins_over_incoming(self) -> None:
        self.doc["pending_friends"].append({"sending": "c", "receiving": "a"})
        self.assertEqual(
            SocialService.check_friendship_status(self.doc, "c"), "pending_outgoing"
        )

    def test_both_perspectives_of_one_request(self) -> None:
        request = {"sending": "a", "receiving": "b"}
        sender = {"id": "a", "friends": [], "pending_friends": [request]}
        receiver = {"id": "b", "friends": [], "pending_friends": [request]}
        self.assertEqual(
            SocialService.check_friendship_status(sender, "b"), "pending_outgoing"
        )
        self.assertEqual(
            SocialService.check_friendship_status(receiver, "a"), "pending_incoming"
        )

    def test_get_friendship_status_reads_current_user(self) -> None:
        db, store = make_store()
        add_user(db, "a", friends=["b"])
        app = create_app({"TESTING": True, "USER_STORE": store})
        with app.app_context():
            self.assertEqual(SocialService.get_friendship_status(store, "a", "b"), "friend")


if __name__ == "__main__":
    unittest.main()
