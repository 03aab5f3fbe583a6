"""Static storefront content: packages, reviews and page copy."""

from app.catalog.schemas import (
    ContactChannel,
    FaqEntry,
    NavLink,
    Package,
    PaymentCategory,
    PaymentMethodInfo,
    Review,
    ShopStat,
)

PACKAGES: tuple[Package, ...] = (
    Package(id=1, amount=60, price=60),
    Package(id=2, amount=325, price=300, bonus=25),
    Package(id=3, amount=660, price=600, bonus=60, popular=True),
    Package(id=4, amount=1800, price=1500, bonus=300),
    Package(id=5, amount=3850, price=3000, bonus=850),
    Package(id=6, amount=8100, price=6000, bonus=2100),
)

REVIEWS: tuple[Review, ...] = (
    Review(id=1, name="Александр", rating=5, text="Быстрая доставка UC, всё пришло за 2 минуты!"),
    Review(id=2, name="Мария", rating=5, text="Отличные цены и бонусы. Покупаю только здесь!"),
    Review(id=3, name="Дмитрий", rating=5, text="Надёжный магазин, оплата криптой прошла без проблем"),
)

# Order matters: the first entry is shown first in the purchase dialog
PAYMENT_METHODS: tuple[PaymentMethodInfo, ...] = (
    PaymentMethodInfo(key="sberbank", label="Карта Сбербанк"),
    PaymentMethodInfo(key="tinkoff", label="Карта Тинькофф"),
    PaymentMethodInfo(key="sbp", label="СБП"),
    PaymentMethodInfo(key="crypto", label="Криптовалюта"),
    PaymentMethodInfo(key="donationalerts", label="DonationAlerts", redirect=True),
)

FAQ: tuple[FaqEntry, ...] = (
    FaqEntry(
        id="item-1",
        question="Как быстро приходят UC?",
        answer=(
            "UC зачисляются на ваш аккаунт автоматически в течение 2-5 минут после оплаты. "
            "В редких случаях может занять до 15 минут."
        ),
    ),
    FaqEntry(
        id="item-2",
        question="Какие данные нужны для покупки?",
        answer=(
            "Для покупки UC нужен только ваш Player ID из PUBG Mobile. "
            "Никакие пароли и личные данные не требуются."
        ),
    ),
    FaqEntry(
        id="item-3",
        question="Безопасна ли оплата криптовалютой?",
        answer=(
            "Да, мы используем проверенные криптовалютные процессоры с многоуровневой защитой. "
            "Все транзакции зашифрованы."
        ),
    ),
    FaqEntry(
        id="item-4",
        question="Что делать если UC не пришли?",
        answer=(
            "Свяжитесь с нашей поддержкой 24/7 через Telegram или WhatsApp. "
            "Мы решим любую проблему в течение часа."
        ),
    ),
    FaqEntry(
        id="item-5",
        question="Можно ли вернуть деньги?",
        answer=(
            "Возврат возможен только если UC не были зачислены на аккаунт по нашей вине. "
            "После зачисления UC возврат не производится."
        ),
    ),
)

SHOP_STATS: tuple[ShopStat, ...] = (
    ShopStat(value="50K+", label="Клиентов"),
    ShopStat(value="2 мин", label="Доставка"),
    ShopStat(value="24/7", label="Поддержка"),
    ShopStat(value="100%", label="Гарантия"),
)

PAYMENT_CATEGORIES: tuple[PaymentCategory, ...] = (
    PaymentCategory(icon="credit-card", title="Банковские карты"),
    PaymentCategory(icon="wallet", title="Электронные кошельки"),
    PaymentCategory(icon="smartphone", title="Мобильные платежи"),
    PaymentCategory(icon="bitcoin", title="Криптовалюта"),
)

CONTACTS: tuple[ContactChannel, ...] = (
    ContactChannel(icon="send", title="Telegram", value="@ucshop_support"),
    ContactChannel(icon="message-circle", title="WhatsApp", value="+7 900 123-45-67"),
    ContactChannel(icon="mail", title="Email", value="support@ucshop.ru"),
)

NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(anchor="catalog", title="Каталог"),
    NavLink(anchor="about", title="О магазине"),
    NavLink(anchor="reviews", title="Отзывы"),
    NavLink(anchor="help", title="Помощь"),
    NavLink(anchor="contacts", title="Контакты"),
)

SOCIAL_ICONS: tuple[str, ...] = ("instagram", "youtube", "send")
