"""
Storage façade: every repository operation bound to one `Database` handle.

HTTP handlers receive a `Storage` (see `main.get_storage`) and call it with
plain values. Results are pydantic records, `None` for "not found", or an
exception propagated from the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from buildmarket.core.db import Database
from buildmarket.crews import repository as crews
from buildmarket.delivery import repository as delivery
from buildmarket.design import repository as design
from buildmarket.estimates import repository as estimates
from buildmarket.guarantees import repository as guarantees
from buildmarket.marketplace import repository as marketplace
from buildmarket.messaging import repository as messaging
from buildmarket.reviews import repository as reviews
from buildmarket.tenders import repository as tenders
from buildmarket.users import repository as users

from buildmarket.crews.schemas import Crew, CrewMember, CrewMemberSkill, CrewPortfolio
from buildmarket.delivery.schemas import DeliveryOption, DeliveryOrder
from buildmarket.design.schemas import DesignProject
from buildmarket.estimates.schemas import Estimate, EstimateItem
from buildmarket.guarantees.schemas import BankGuarantee
from buildmarket.marketplace.schemas import MarketplaceListing
from buildmarket.messaging.schemas import Message, Notification
from buildmarket.reviews.schemas import Review
from buildmarket.tenders.schemas import Tender, TenderBid
from buildmarket.users.schemas import User

Data = Mapping[str, Any]


class Storage:
    def __init__(self, db: Database) -> None:
        self.db = db

    # ── Users ────────────────────────────────────────────

    async def get_user(self, user_id: int) -> User | None:
        return await users.get_user(self.db, user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return await users.get_user_by_username(self.db, username)

    async def get_user_by_email(self, email: str) -> User | None:
        return await users.get_user_by_email(self.db, email)

    async def get_users(self, filters: Data | None = None) -> list[User]:
        return await users.get_users(self.db, filters)

    async def get_top_specialists(self, limit: int = 10) -> list[User]:
        return await users.get_top_specialists(self.db, limit=limit)

    async def create_user(self, data: Data) -> User:
        return await users.create_user(self.db, data)

    async def update_user(self, user_id: int, patch: Data) -> User | None:
        return await users.update_user(self.db, user_id, patch)

    async def delete_user(self, user_id: int) -> bool:
        return await users.delete_user(self.db, user_id)

    async def update_wallet_balance(self, user_id: int, delta: float) -> User | None:
        return await users.update_wallet_balance(self.db, user_id, delta)

    async def update_user_rating(self, user_id: int) -> int:
        return await users.update_user_rating(self.db, user_id)

    # ── Tenders ──────────────────────────────────────────

    async def get_tender(self, tender_id: int) -> Tender | None:
        return await tenders.get_tender(self.db, tender_id)

    async def get_tenders(self, filters: Data | None = None) -> list[Tender]:
        return await tenders.get_tenders(self.db, filters)

    async def get_user_tenders(self, user_id: int) -> list[Tender]:
        return await tenders.get_user_tenders(self.db, user_id)

    async def create_tender(self, data: Data) -> Tender:
        return await tenders.create_tender(self.db, data)

    async def update_tender(self, tender_id: int, patch: Data) -> Tender | None:
        return await tenders.update_tender(self.db, tender_id, patch)

    async def delete_tender(self, tender_id: int) -> bool:
        return await tenders.delete_tender(self.db, tender_id)

    async def increment_tender_views(self, tender_id: int) -> int | None:
        return await tenders.increment_tender_views(self.db, tender_id)

    async def update_tender_moderation_status(self, tender_id: int, status: str) -> Tender | None:
        return await tenders.update_tender_moderation_status(self.db, tender_id, status)

    async def get_tender_bid(self, bid_id: int) -> TenderBid | None:
        return await tenders.get_tender_bid(self.db, bid_id)

    async def get_tender_bids(self, tender_id: int) -> list[TenderBid]:
        return await tenders.get_tender_bids(self.db, tender_id)

    async def get_user_tender_bids(self, user_id: int) -> list[TenderBid]:
        return await tenders.get_user_tender_bids(self.db, user_id)

    async def create_tender_bid(self, data: Data) -> TenderBid:
        return await tenders.create_tender_bid(self.db, data)

    async def update_tender_bid(self, bid_id: int, patch: Data) -> TenderBid | None:
        return await tenders.update_tender_bid(self.db, bid_id, patch)

    async def update_tender_bid_status(self, bid_id: int, status: str) -> TenderBid | None:
        return await tenders.update_tender_bid_status(self.db, bid_id, status)

    async def accept_tender_bid(self, bid_id: int) -> TenderBid | None:
        return await tenders.accept_tender_bid(self.db, bid_id)

    async def delete_tender_bid(self, bid_id: int) -> bool:
        return await tenders.delete_tender_bid(self.db, bid_id)

    # ── Marketplace ──────────────────────────────────────

    async def get_marketplace_listing(self, listing_id: int) -> MarketplaceListing | None:
        return await marketplace.get_marketplace_listing(self.db, listing_id)

    async def get_marketplace_listings(self, filters: Data | None = None) -> list[MarketplaceListing]:
        return await marketplace.get_marketplace_listings(self.db, filters)

    async def create_marketplace_listing(self, data: Data) -> MarketplaceListing:
        return await marketplace.create_marketplace_listing(self.db, data)

    async def update_marketplace_listing(self, listing_id: int, patch: Data) -> MarketplaceListing | None:
        return await marketplace.update_marketplace_listing(self.db, listing_id, patch)

    async def delete_marketplace_listing(self, listing_id: int) -> bool:
        return await marketplace.delete_marketplace_listing(self.db, listing_id)

    async def increment_listing_views(self, listing_id: int) -> int | None:
        return await marketplace.increment_listing_views(self.db, listing_id)

    async def update_listing_moderation_status(self, listing_id: int, status: str) -> MarketplaceListing | None:
        return await marketplace.update_listing_moderation_status(self.db, listing_id, status)

    # ── Messages & notifications ─────────────────────────

    async def get_message(self, message_id: int) -> Message | None:
        return await messaging.get_message(self.db, message_id)

    async def get_user_messages(self, user_id: int) -> list[Message]:
        return await messaging.get_user_messages(self.db, user_id)

    async def get_messages_between(self, user_id: int, other_user_id: int) -> list[Message]:
        return await messaging.get_messages_between(self.db, user_id, other_user_id)

    async def get_unread_message_count(self, user_id: int) -> int:
        return await messaging.get_unread_message_count(self.db, user_id)

    async def create_message(self, data: Data) -> Message:
        return await messaging.create_message(self.db, data)

    async def mark_message_as_read(self, message_id: int) -> Message | None:
        return await messaging.mark_message_as_read(self.db, message_id)

    async def delete_message(self, message_id: int) -> bool:
        return await messaging.delete_message(self.db, message_id)

    async def get_notification(self, notification_id: int) -> Notification | None:
        return await messaging.get_notification(self.db, notification_id)

    async def get_user_notifications(self, user_id: int, unread_only: bool = False) -> list[Notification]:
        return await messaging.get_user_notifications(self.db, user_id, unread_only=unread_only)

    async def create_notification(self, data: Data) -> Notification:
        return await messaging.create_notification(self.db, data)

    async def mark_notification_as_read(self, notification_id: int) -> Notification | None:
        return await messaging.mark_notification_as_read(self.db, notification_id)

    async def mark_all_notifications_as_read(self, user_id: int) -> int:
        return await messaging.mark_all_notifications_as_read(self.db, user_id)

    async def delete_notification(self, notification_id: int) -> bool:
        return await messaging.delete_notification(self.db, notification_id)

    # ── Reviews ──────────────────────────────────────────

    async def get_review(self, review_id: int) -> Review | None:
        return await reviews.get_review(self.db, review_id)

    async def get_user_reviews(self, recipient_id: int) -> list[Review]:
        return await reviews.get_user_reviews(self.db, recipient_id)

    async def get_reviews_by_author(self, author_id: int) -> list[Review]:
        return await reviews.get_reviews_by_author(self.db, author_id)

    async def get_crew_reviews(self, crew_id: int) -> list[Review]:
        return await reviews.get_crew_reviews(self.db, crew_id)

    async def create_review(self, data: Data) -> Review:
        return await reviews.create_review(self.db, data)

    async def update_review(self, review_id: int, patch: Data) -> Review | None:
        return await reviews.update_review(self.db, review_id, patch)

    async def delete_review(self, review_id: int) -> bool:
        return await reviews.delete_review(self.db, review_id)

    # ── Delivery ─────────────────────────────────────────

    async def get_delivery_options(self) -> list[DeliveryOption]:
        return await delivery.get_delivery_options(self.db)

    async def get_delivery_option(self, option_id: int) -> DeliveryOption | None:
        return await delivery.get_delivery_option(self.db, option_id)

    async def create_delivery_option(self, data: Data) -> DeliveryOption:
        return await delivery.create_delivery_option(self.db, data)

    async def update_delivery_option(self, option_id: int, patch: Data) -> DeliveryOption | None:
        return await delivery.update_delivery_option(self.db, option_id, patch)

    async def delete_delivery_option(self, option_id: int) -> bool:
        return await delivery.delete_delivery_option(self.db, option_id)

    async def get_delivery_order(self, order_id: int) -> DeliveryOrder | None:
        return await delivery.get_delivery_order(self.db, order_id)

    async def get_delivery_orders(self, filters: Data | None = None) -> list[DeliveryOrder]:
        return await delivery.get_delivery_orders(self.db, filters)

    async def get_user_delivery_orders(self, user_id: int) -> list[DeliveryOrder]:
        return await delivery.get_user_delivery_orders(self.db, user_id)

    async def create_delivery_order(self, data: Data) -> DeliveryOrder:
        return await delivery.create_delivery_order(self.db, data)

    async def update_delivery_order(self, order_id: int, patch: Data) -> DeliveryOrder | None:
        return await delivery.update_delivery_order(self.db, order_id, patch)

    async def update_delivery_order_status(self, order_id: int, status: str) -> DeliveryOrder | None:
        return await delivery.update_delivery_order_status(self.db, order_id, status)

    async def update_delivery_order_tracking(self, order_id: int, tracking_code: str) -> DeliveryOrder | None:
        return await delivery.update_delivery_order_tracking(self.db, order_id, tracking_code)

    async def delete_delivery_order(self, order_id: int) -> bool:
        return await delivery.delete_delivery_order(self.db, order_id)

    # ── Estimates ────────────────────────────────────────

    async def get_estimate(self, estimate_id: int) -> Estimate | None:
        return await estimates.get_estimate(self.db, estimate_id)

    async def get_estimates(self, filters: Data | None = None) -> list[Estimate]:
        return await estimates.get_estimates(self.db, filters)

    async def get_user_estimates(self, user_id: int) -> list[Estimate]:
        return await estimates.get_user_estimates(self.db, user_id)

    async def create_estimate(self, data: Data) -> Estimate:
        return await estimates.create_estimate(self.db, data)

    async def update_estimate(self, estimate_id: int, patch: Data) -> Estimate | None:
        return await estimates.update_estimate(self.db, estimate_id, patch)

    async def delete_estimate(self, estimate_id: int) -> bool:
        return await estimates.delete_estimate(self.db, estimate_id)

    async def recalculate_estimate_total(self, estimate_id: int) -> Estimate | None:
        return await estimates.recalculate_estimate_total(self.db, estimate_id)

    async def get_estimate_item(self, item_id: int) -> EstimateItem | None:
        return await estimates.get_estimate_item(self.db, item_id)

    async def get_estimate_items(self, estimate_id: int) -> list[EstimateItem]:
        return await estimates.get_estimate_items(self.db, estimate_id)

    async def create_estimate_item(self, data: Data) -> EstimateItem:
        return await estimates.create_estimate_item(self.db, data)

    async def update_estimate_item(self, item_id: int, patch: Data) -> EstimateItem | None:
        return await estimates.update_estimate_item(self.db, item_id, patch)

    async def delete_estimate_item(self, item_id: int) -> bool:
        return await estimates.delete_estimate_item(self.db, item_id)

    # ── Design projects ──────────────────────────────────

    async def get_design_project(self, project_id: int) -> DesignProject | None:
        return await design.get_design_project(self.db, project_id)

    async def get_design_projects(self, filters: Data | None = None) -> list[DesignProject]:
        return await design.get_design_projects(self.db, filters)

    async def create_design_project(self, data: Data) -> DesignProject:
        return await design.create_design_project(self.db, data)

    async def update_design_project(self, project_id: int, patch: Data) -> DesignProject | None:
        return await design.update_design_project(self.db, project_id, patch)

    async def delete_design_project(self, project_id: int) -> bool:
        return await design.delete_design_project(self.db, project_id)

    async def add_project_visualization(self, project_id: int, url: str) -> DesignProject | None:
        return await design.add_project_visualization(self.db, project_id, url)

    async def add_project_file(self, project_id: int, file_url: str) -> DesignProject | None:
        return await design.add_project_file(self.db, project_id, file_url)

    # ── Crews ────────────────────────────────────────────

    async def get_crew(self, crew_id: int) -> Crew | None:
        return await crews.get_crew(self.db, crew_id)

    async def get_crews(self, filters: Data | None = None) -> list[Crew]:
        return await crews.get_crews(self.db, filters)

    async def get_user_crews(self, owner_id: int) -> list[Crew]:
        return await crews.get_user_crews(self.db, owner_id)

    async def create_crew(self, data: Data) -> Crew:
        return await crews.create_crew(self.db, data)

    async def update_crew(self, crew_id: int, patch: Data) -> Crew | None:
        return await crews.update_crew(self.db, crew_id, patch)

    async def delete_crew(self, crew_id: int) -> bool:
        return await crews.delete_crew(self.db, crew_id)

    async def get_crew_member(self, member_id: int) -> CrewMember | None:
        return await crews.get_crew_member(self.db, member_id)

    async def get_crew_members(self, crew_id: int) -> list[CrewMember]:
        return await crews.get_crew_members(self.db, crew_id)

    async def create_crew_member(self, data: Data) -> CrewMember:
        return await crews.create_crew_member(self.db, data)

    async def update_crew_member(self, member_id: int, patch: Data) -> CrewMember | None:
        return await crews.update_crew_member(self.db, member_id, patch)

    async def delete_crew_member(self, member_id: int) -> bool:
        return await crews.delete_crew_member(self.db, member_id)

    async def get_crew_member_skills(self, member_id: int) -> list[CrewMemberSkill]:
        return await crews.get_crew_member_skills(self.db, member_id)

    async def create_crew_member_skill(self, data: Data) -> CrewMemberSkill:
        return await crews.create_crew_member_skill(self.db, data)

    async def update_crew_member_skill(self, skill_id: int, patch: Data) -> CrewMemberSkill | None:
        return await crews.update_crew_member_skill(self.db, skill_id, patch)

    async def delete_crew_member_skill(self, skill_id: int) -> bool:
        return await crews.delete_crew_member_skill(self.db, skill_id)

    async def get_crew_portfolio(self, portfolio_id: int) -> CrewPortfolio | None:
        return await crews.get_crew_portfolio(self.db, portfolio_id)

    async def get_crew_portfolios(self, crew_id: int) -> list[CrewPortfolio]:
        return await crews.get_crew_portfolios(self.db, crew_id)

    async def create_crew_portfolio(self, data: Data) -> CrewPortfolio:
        return await crews.create_crew_portfolio(self.db, data)

    async def update_crew_portfolio(self, portfolio_id: int, patch: Data) -> CrewPortfolio | None:
        return await crews.update_crew_portfolio(self.db, portfolio_id, patch)

    async def delete_crew_portfolio(self, portfolio_id: int) -> bool:
        return await crews.delete_crew_portfolio(self.db, portfolio_id)

    # ── Bank guarantees ──────────────────────────────────

    async def get_bank_guarantee(self, guarantee_id: int) -> BankGuarantee | None:
        return await guarantees.get_bank_guarantee(self.db, guarantee_id)

    async def get_bank_guarantees(self, filters: Data | None = None) -> list[BankGuarantee]:
        return await guarantees.get_bank_guarantees(self.db, filters)

    async def get_user_bank_guarantees(self, user_id: int) -> list[BankGuarantee]:
        return await guarantees.get_user_bank_guarantees(self.db, user_id)

    async def create_bank_guarantee(self, data: Data) -> BankGuarantee:
        return await guarantees.create_bank_guarantee(self.db, data)

    async def update_bank_guarantee(self, guarantee_id: int, patch: Data) -> BankGuarantee | None:
        return await guarantees.update_bank_guarantee(self.db, guarantee_id, patch)

    async def update_bank_guarantee_status(self, guarantee_id: int, status: str) -> BankGuarantee | None:
        return await guarantees.update_bank_guarantee_status(self.db, guarantee_id, status)

    async def delete_bank_guarantee(self, guarantee_id: int) -> bool:
        return await guarantees.delete_bank_guarantee(self.db, guarantee_id)
