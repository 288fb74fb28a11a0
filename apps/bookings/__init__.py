"""Bookings app package.

This app encapsulates the booking domain: the booking model, the Stripe
payment gateway and the two-step flow that first opens a PaymentIntent
for a stay and then records the booking once Stripe reports the payment
as succeeded.
"""
