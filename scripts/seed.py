"""Seed a demo user with a few paid bookings."""
from datetime import timedelta
from uuid import uuid4

from app.db import open_session
from app.models import Booking, BookingStatus, Payment, PaymentOption, User
from app.utils.time import utcnow


def seed() -> None:
    db = open_session()
    try:
        user = db.query(User).filter(User.username == "demo").first()
        if user is None:
            user = User(username="demo", email="demo@example.com", name="Demo User")
            db.add(user)
            db.flush()

        start = utcnow().replace(minute=0, second=0, microsecond=0) + timedelta(days=1)
        for index, (amount, option) in enumerate(
            [(5000, PaymentOption.ON_BOOKING), (12000, PaymentOption.HOLD)]
        ):
            booking = Booking(
                uid=uuid4().hex,
                title=f"Demo session {index + 1}",
                start_time=start + timedelta(days=index),
                end_time=start + timedelta(days=index, hours=1),
                status=BookingStatus.ACCEPTED,
                user_id=user.id,
            )
            db.add(booking)
            db.flush()
            db.add(
                Payment(
                    uid=uuid4().hex,
                    booking_id=booking.id,
                    amount=amount,
                    fee=0,
                    currency="usd",
                    success=option is PaymentOption.ON_BOOKING,
                    refunded=False,
                    payment_option=option,
                    app_id="stripe",
                    external_id=f"pi_{uuid4().hex}",
                    data={},
                )
            )
        db.commit()
        print(f"Seeded user {user.username} (id={user.id})")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
