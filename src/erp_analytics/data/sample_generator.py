"""Sample data generator for ERP products, suppliers and orders."""

import random
from datetime import datetime, timedelta

from faker import Faker

from .models import ORDER_STATUSES, Order, OrderItem, Product, Supplier


class SampleDataGenerator:
    """Generate realistic sample data for the ERP dashboard."""

    CATEGORIES = [
        "Electronics",
        "Clothing",
        "Groceries",
        "Home & Garden",
        "Sports & Outdoors",
        "Office Supplies",
    ]

    PRODUCT_TEMPLATES = {
        "Electronics": ["Wireless Mouse", "Keyboard", "Monitor", "Headphones", "USB Cable", "Webcam"],
        "Clothing": ["T-Shirt", "Jeans", "Jacket", "Sneakers", "Hoodie", "Cap"],
        "Groceries": ["Coffee Beans", "Pasta", "Rice", "Olive Oil", "Cereal", "Green Tea"],
        "Home & Garden": ["LED Light Bulb", "Plant Pot", "Garden Hose", "Tool Set", "Storage Box", "Door Mat"],
        "Sports & Outdoors": ["Yoga Mat", "Dumbbell Set", "Basketball", "Camping Tent", "Water Bottle"],
        "Office Supplies": ["Stapler", "Printer Paper", "Desk Lamp", "Notebook", "Ballpoint Pens"],
    }

    PRICE_RANGES = {
        "Electronics": (19.99, 499.99),
        "Clothing": (9.99, 149.99),
        "Groceries": (1.99, 39.99),
        "Home & Garden": (4.99, 199.99),
        "Sports & Outdoors": (9.99, 399.99),
        "Office Supplies": (1.49, 89.99),
    }

    PAYMENT_TERMS = ["Net 15", "Net 30", "Net 60", "Due on receipt"]

    # Relative weights for ORDER_STATUSES (pending .. cancelled)
    STATUS_WEIGHTS = [0.12, 0.10, 0.10, 0.13, 0.47, 0.08]

    def __init__(self, seed: int = 42, user_id: str | None = None):
        """
        Initialize the sample data generator.

        Args:
            seed: Random seed for reproducibility
            user_id: Account that owns the generated records (optional)
        """
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.rng = random.Random(seed)
        self.user_id = user_id

    def generate_suppliers(self, count: int = 25) -> list[Supplier]:
        """
        Generate sample suppliers, roughly 85% active.

        Args:
            count: Number of suppliers to generate

        Returns:
            List of Supplier instances
        """
        now = datetime.now()
        suppliers = []
        for i in range(count):
            suppliers.append(
                Supplier(
                    id=f"sup_{1000 + i}",
                    name=self.fake.company(),
                    contact_person=self.fake.name(),
                    email=self.fake.company_email(),
                    phone=self.fake.phone_number(),
                    address=self.fake.street_address(),
                    city=self.fake.city(),
                    country=self.fake.country(),
                    payment_terms=self.rng.choice(self.PAYMENT_TERMS),
                    status="active" if self.rng.random() < 0.85 else "inactive",
                    user_id=self.user_id,
                    created_at=now,
                    updated_at=now,
                )
            )
        return suppliers

    def generate_products(self, count: int = 200, suppliers: list[Supplier] | None = None) -> list[Product]:
        """
        Generate sample products across categories.

        Args:
            count: Number of products to generate
            suppliers: Suppliers to reference (a placeholder supplier is used if empty)

        Returns:
            List of Product instances
        """
        now = datetime.now()
        products = []

        for i in range(count):
            category = self.rng.choice(self.CATEGORIES)
            template = self.rng.choice(self.PRODUCT_TEMPLATES[category])
            name = f"{template} {self.rng.choice(['Pro', 'Plus', 'Basic', 'Deluxe', 'Mini'])}"

            # Stock distribution: 60% normal, 25% low, 10% out, 5% overstocked
            roll = self.rng.random()
            if roll < 0.60:
                current_stock = self.rng.randint(30, 200)
            elif roll < 0.85:
                current_stock = self.rng.randint(1, 20)
            elif roll < 0.95:
                current_stock = 0
            else:
                current_stock = self.rng.randint(201, 500)

            price = round(self.rng.uniform(*self.PRICE_RANGES[category]), 2)
            supplier = self.rng.choice(suppliers) if suppliers else None
            reorder_level = self.rng.randint(10, 40)

            products.append(
                Product(
                    id=f"prod_{10000 + i}",
                    name=name,
                    sku=f"SKU-{10000 + i:05d}",
                    category=category,
                    price=price,
                    cost=round(price * self.rng.uniform(0.4, 0.75), 2),
                    current_stock=current_stock,
                    reorder_level=reorder_level,
                    max_stock_level=reorder_level * 10,
                    supplier=supplier.name if supplier else "Unassigned",
                    supplier_id=supplier.id if supplier else None,
                    location=f"Aisle {self.rng.randint(1, 20)}",
                    description=self.fake.sentence(nb_words=10),
                    barcode=self.fake.ean13(),
                    user_id=self.user_id,
                    created_at=now,
                    updated_at=now,
                )
            )

        return products

    def generate_orders(
        self,
        products: list[Product],
        count: int = 1500,
        days: int = 365,
        suppliers: list[Supplier] | None = None,
    ) -> list[Order]:
        """
        Generate sales and purchase orders spread over the trailing days.

        Args:
            products: Products to put on order lines
            count: Number of orders to generate
            days: Number of days of history
            suppliers: Suppliers referenced by purchase orders (optional)

        Returns:
            List of Order instances, newest first
        """
        if not products:
            return []

        now = datetime.now()
        orders = []

        for i in range(count):
            created_at = now - timedelta(
                days=self.rng.randint(0, days - 1),
                hours=self.rng.randint(0, 23),
                minutes=self.rng.randint(0, 59),
            )
            order_type = "sales" if self.rng.random() < 0.8 else "purchase"
            status = self.rng.choices(ORDER_STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

            items = []
            for product in self.rng.sample(products, k=min(len(products), self.rng.randint(1, 4))):
                quantity = self.rng.randint(1, 5) if order_type == "sales" else self.rng.randint(10, 100)
                unit_price = product.price if order_type == "sales" else product.cost
                items.append(
                    OrderItem(
                        product_id=product.id,
                        product_name=product.name,
                        sku=product.sku,
                        quantity=quantity,
                        unit_price=unit_price,
                        total_price=round(unit_price * quantity, 2),
                    )
                )

            supplier = self.rng.choice(suppliers) if order_type == "purchase" and suppliers else None
            orders.append(
                Order(
                    id=f"ord_{100000 + i}",
                    order_number=f"{'SO' if order_type == 'sales' else 'PO'}-{100000 + i}",
                    type=order_type,
                    status=status,
                    total=round(sum(item.total_price for item in items), 2),
                    created_at=created_at,
                    customer_name=self.fake.name() if order_type == "sales" else (supplier.name if supplier else ""),
                    customer_email=self.fake.email() if order_type == "sales" else None,
                    customer_phone=self.fake.phone_number() if order_type == "sales" else None,
                    shipping_address=self.fake.address().replace("\n", ", ") if order_type == "sales" else None,
                    supplier_id=supplier.id if supplier else None,
                    order_date=created_at,
                    expected_delivery=created_at + timedelta(days=self.rng.randint(2, 14)),
                    items=tuple(items),
                    user_id=self.user_id,
                    updated_at=created_at,
                )
            )

        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders
