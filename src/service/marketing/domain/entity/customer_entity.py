import attrs


@attrs.frozen
class Customer:
    customer_id: int
    name: str
    email: str
    phone: str
    friend_member: bool = False  # "Friend of Lancaster" membership tier
