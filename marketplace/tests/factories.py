import random
import uuid
from decimal import Decimal

import factory
from faker import Faker

from authentication.models import Address, Admin, Buyer, Seller
from marketplace.models import CartLine, Order, Product

fake = Faker()  # Instantiate Faker once


class BuyerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Buyer

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"buyer_{n}@example.com")
    gender = factory.Iterator([choice[0] for choice in Buyer.GENDER_CHOICES])
    mobile_number = factory.LazyFunction(lambda: fake.numerify("9#########"))
    location = factory.Faker("city")
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")


class SellerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Seller

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Faker("company")
    username = factory.Sequence(lambda n: f"seller_{n}")
    email = factory.Sequence(lambda n: f"seller_{n}@example.com")
    mobile_number = factory.LazyFunction(lambda: fake.numerify("8#########"))
    national_id = factory.LazyFunction(lambda: fake.bothify("??########").upper())
    location = factory.Faker("city")
    status = Seller.STATUS_APPROVED
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")


class PendingSellerFactory(SellerFactory):
    status = Seller.STATUS_PENDING
    username = factory.Sequence(lambda n: f"pending_seller_{n}")
    email = factory.Sequence(lambda n: f"pending_seller_{n}@example.com")


class AdminFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Admin

    id = factory.LazyFunction(uuid.uuid4)
    username = factory.Sequence(lambda n: f"admin_{n}")
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")


class AddressFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Address

    id = factory.LazyFunction(uuid.uuid4)
    buyer = factory.SubFactory(BuyerFactory)
    house_number = factory.Faker("building_number")
    street = factory.Faker("street_name")
    city = factory.Faker("city")
    state = factory.Faker("state")
    pincode = factory.LazyFunction(lambda: fake.numerify("######"))


class ProductFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Product

    id = factory.LazyFunction(uuid.uuid4)
    seller = factory.SubFactory(SellerFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    category = factory.Iterator(["electronics", "books", "home", "fashion"])
    description = factory.Faker("paragraph", nb_sentences=3)
    cost = factory.LazyFunction(lambda: Decimal(f"{random.randint(10, 500)}.00"))
    image_url = factory.Sequence(lambda n: f"https://media.llcart.test/llcart/products/{n}.jpg")
    image_key = factory.Sequence(lambda n: f"llcart/products/{n}.jpg")


class CartLineFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CartLine

    id = factory.LazyFunction(uuid.uuid4)
    buyer = factory.SubFactory(BuyerFactory)
    product = factory.SubFactory(ProductFactory)
    quantity = 1


class OrderFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Order

    id = factory.LazyFunction(uuid.uuid4)
    buyer = factory.SubFactory(BuyerFactory)
    product = factory.SubFactory(ProductFactory)
    seller = factory.LazyAttribute(lambda o: o.product.seller)
    product_name = factory.LazyAttribute(lambda o: o.product.name)
    quantity = 1
    amount = factory.LazyAttribute(lambda o: o.product.cost * o.quantity)
    payment_reference = factory.Sequence(lambda n: f"pay_{n:06d}")
