"""Integration catalogue — one static template per supported webhook type."""

from echoday.schemas import WebhookSettings, WebhookTemplate, WebhookType

# ── Default settings ────────────────────────────────────
_CHAT_DEFAULTS = {"retry_count": 3, "timeout_ms": 5000, "include_details": True}
_AUTOMATION_DEFAULTS = {"retry_count": 2, "timeout_ms": 10000, "include_details": True}
_GENERIC_DEFAULTS = {"retry_count": 2, "timeout_ms": 10000, "include_details": False}


TEMPLATES: tuple[WebhookTemplate, ...] = (
    WebhookTemplate(
        type=WebhookType.SLACK,
        name="Slack",
        description="Takım kanalına bildirim gönder",
        icon="💬",
        briefing=(
            "Slack, dünya çapında milyonlarca kişinin kullandığı bir takım iletişim platformudur. "
            "EchoDay görevlerinizi otomatik olarak Slack kanallarınıza bildirerek takımınızı her zaman "
            "bilgilendirebilirsiniz."
        ),
        use_cases=[
            "Tamamlanan görevleri takım kanalına bildir",
            "Günlük özeti her sabah paylaş",
            "Önemli hatırlatıcıları bildir",
            "Proje ilerlemesini güncel tut",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. Tarayıcınızda https://slack.com/apps sayfasını açın (Slack hesabınıza giriş yapın)",
            '2. Arama kutusuna "Incoming Webhooks" yazın ve çıkan sonuca tıklayın',
            '3. Yeşil "Add to Slack" butonunu bulun ve tıklayın',
            "4. Açılan menüden bildirimlerin gönderileceği kanalı seçin",
            '5. "Add Incoming WebHooks integration" veya "Allow" butonuna tıklayın',
            "6. Sayfada görünen uzun URL'i kopyalayın (https://hooks.slack.com/... ile başlar)",
            '7. Kopyaladığınız URL\'i "Webhook URL" alanına yapıştırın',
        ],
        example_url="https://hooks.slack.com/services/T{workspace}/B{channel}/XXXXXXXXXXXXXXXXXXXXXXXX",
    ),
    WebhookTemplate(
        type=WebhookType.DISCORD,
        name="Discord",
        description="Discord sunucuna mesaj gönder",
        icon="🎮",
        briefing=(
            "Discord, oyuncular ve topluluklar için popüler bir sohbet platformudur. Görevlerinizi "
            "Discord sunucunuza otomatik olarak göndererek topluluğunuzu bilgilendirebilirsiniz."
        ),
        use_cases=[
            "Proje güncellemelerini toplulukla paylaş",
            "Tamamlanan görevleri duyur",
            "Haftalık raporları otomatik paylaş",
            "Takım koordinasyonunu kolaylaştır",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. Discord uygulamasını açın ve webhook eklemek istediğiniz sunucuya gidin",
            "2. Kanalın yanındaki dişli çark (ayarlar) ikonuna tıklayın",
            '3. Sol menüden "Integrations" (Entegrasyonlar) sekmesini açın',
            '4. "Webhooks" bölümünde "New Webhook" butonuna tıklayın',
            "5. Webhook'a bir isim verin (isteğe bağlı olarak profil resmi ekleyin)",
            '6. "Copy Webhook URL" butonuyla URL\'i kopyalayın',
            '7. Kopyaladığınız URL\'i "Webhook URL" alanına yapıştırın',
        ],
        example_url="https://discord.com/api/webhooks/YOUR_WEBHOOK_ID/YOUR_WEBHOOK_TOKEN",
    ),
    WebhookTemplate(
        type=WebhookType.TELEGRAM,
        name="Telegram",
        description="Telegram bot ile mesaj gönder",
        icon="✈️",
        briefing=(
            "Telegram, hızlı ve güvenli bir mesajlaşma uygulamasıdır. Kendi botunuzu oluşturarak "
            "EchoDay bildirimlerini doğrudan Telegram'a alabilirsiniz."
        ),
        use_cases=[
            "Kişisel hatırlatıcıları telefona gönder",
            "Günlük özeti sabah oku",
            "Acil görevleri anında bildir",
            "Mobil bildirim sistemi kur",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            '1. Telegram\'da arama kutusuna "BotFather" yazın',
            "2. Mavi tikli resmi BotFather hesabıyla sohbeti açın",
            '3. "/newbot" yazıp gönderin',
            "4. Bot için bir ad girin (ör: \"EchoDay Bildirici\")",
            '5. "bot" ile biten bir kullanıcı adı girin (ör: "echoday_notifier_bot")',
            "6. BotFather'ın verdiği token'ı kopyalayın (ör: 123456:ABC-DEF...)",
            "7. Bota mesaj gönderip chat_id değerinizi alın (https://t.me/username_to_id_bot)",
        ],
        example_url="https://api.telegram.org/botYOUR_BOT_TOKEN/sendMessage",
    ),
    WebhookTemplate(
        type=WebhookType.TEAMS,
        name="Microsoft Teams",
        description="Teams kanalına bildirim gönder",
        icon="👥",
        briefing=(
            "Microsoft Teams, kurumsal takımlar için güçlü bir iş birliği platformudur. EchoDay "
            "görevlerinizi Teams kanallarınıza göndererek takımınızı senkronize tutun."
        ),
        use_cases=[
            "Kurumsal proje güncellemeleri",
            "Toplantı hatırlatmaları",
            "Takım performans raporları",
            "İş akışı bildirimleri",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. Microsoft Teams'te webhook eklemek istediğiniz kanalı bulun",
            "2. Kanal adının yanındaki üç nokta (...) menüsüne tıklayın",
            '3. "Connectors" (Bağlayıcılar) seçeneğini açın',
            '4. "Incoming Webhook" için "Configure" butonuna tıklayın',
            "5. Webhook'a anlamlı bir isim verin",
            '6. "Create" butonuna tıklayın, ekranda uzun bir URL göreceksiniz',
            '7. URL\'i kopyalayın ve "Done" butonuna basın',
        ],
        example_url="https://outlook.office.com/webhook/xxx/IncomingWebhook/xxx",
    ),
    WebhookTemplate(
        type=WebhookType.ZAPIER,
        name="Zapier",
        description="5000+ uygulama ile entegrasyon",
        icon="⚡",
        briefing=(
            "Zapier, 5000'den fazla uygulamayı birbirine bağlayan bir otomasyon platformudur. "
            "EchoDay görevlerinizi Gmail, Sheets, CRM ve daha fazlasıyla entegre edin."
        ),
        use_cases=[
            "Tamamlanan görevleri Google Sheets'e ekle",
            "Yeni görevi Gmail ile paylaş",
            "CRM'e otomatik görev aktar",
            "Binlerce farklı uygulama ile entegre ol",
        ],
        default_settings=WebhookSettings(**_AUTOMATION_DEFAULTS),
        setup_instructions=[
            "1. https://zapier.com/app/zaps adresini açın",
            '2. "Create Zap" butonuna tıklayın',
            '3. Trigger olarak "Webhooks by Zapier" seçin',
            '4. Event tipi olarak "Catch Hook" seçip "Continue" deyin',
            "5. Zapier'in verdiği webhook URL'ini kopyalayın",
            "6. Action kısmında verileri göndermek istediğiniz uygulamayı seçin",
            "7. Kopyaladığınız URL'i webhook alanına yapıştırın",
        ],
        example_url="https://hooks.zapier.com/hooks/catch/YOUR_HOOK_ID/YOUR_HOOK_KEY/",
    ),
    WebhookTemplate(
        type=WebhookType.MAKE,
        name="Make (Integromat)",
        description="Görsel otomasyon platformu",
        icon="🧩",
        briefing=(
            "Make (eski adıyla Integromat), sürükle-bırak arayüzü ile karmaşık otomasyon "
            "senaryoları oluşturmanızı sağlar."
        ),
        use_cases=[
            "Karmaşık iş akışları oluştur",
            "Çoklu uygulama entegrasyonu",
            "Veri dönüştürme ve işleme",
            "Şartlı otomasyon senaryoları",
        ],
        default_settings=WebhookSettings(**_AUTOMATION_DEFAULTS),
        setup_instructions=[
            "1. https://www.make.com/en/login adresinden giriş yapın",
            '2. "Create a new scenario" butonuna tıklayın',
            "3. Canvas üzerindeki artı (+) işaretine tıklayın",
            '4. "Webhooks" modülünü seçin',
            '5. "Custom webhook" seçeneğini işaretleyin',
            '6. "Add" ile yeni bir webhook oluşturun',
            "7. Gösterilen URL'i kopyalayıp webhook alanına yapıştırın",
        ],
        example_url="https://hook.eu1.make.com/YOUR_HOOK_ID",
    ),
    WebhookTemplate(
        type=WebhookType.NOTION,
        name="Notion",
        description="Notion veritabanına otomatik ekle",
        icon="📑",
        briefing=(
            "Notion, not alma, proje yönetimi ve bilgi tabanları için hepsi bir arada bir çalışma "
            "alanıdır. EchoDay görevlerinizi Notion veritabanınıza aktarın."
        ),
        use_cases=[
            "Görev veritabanı oluştur",
            "Proje dokümantasyonu güncelle",
            "Haftalık raporları arşivle",
            "Bilgi tabanlarını zenginleştir",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. https://www.notion.so/my-integrations adresini açın",
            '2. "+ New integration" butonuna tıklayın',
            "3. Integration'a anlamlı bir isim verin",
            '4. Workspace seçip "Submit" butonuna basın',
            '5. "Internal Integration Token" değerini kopyalayın',
            '6. Veritabanı sayfasında "..." -> "Add connections" ile integration\'ı ekleyin',
            "7. URL olarak https://api.notion.com/v1/pages kullanın",
        ],
        example_url="https://api.notion.com/v1/pages",
    ),
    WebhookTemplate(
        type=WebhookType.TRELLO,
        name="Trello",
        description="Trello kartlarına otomatik ekle",
        icon="📋",
        briefing=(
            "Trello, Kanban tabanlı popüler bir proje yönetim aracıdır. EchoDay görevlerinizi "
            "Trello kartları olarak otomatik oluşturun."
        ),
        use_cases=[
            "Görevleri Trello kartı olarak ekle",
            "Sprint planlarını güncelle",
            "Takım panosunu senkronize et",
            "Proje ilerlemesini takip et",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. https://trello.com/power-ups/admin adresini açın",
            '2. "New" butonuyla yeni bir Power-Up oluşturun',
            "3. Power-Up'a bir isim verin",
            "4. https://trello.com/app-key adresinden API Key'inizi alın",
            '5. Aynı sayfadaki "Token" linkiyle yetkilendirme yapın',
            "6. URL formatı: https://api.trello.com/1/cards?key=SIZIN_KEY&token=SIZIN_TOKEN",
            "7. URL'i kendi Key ve Token'ınızla doldurup yapıştırın",
        ],
        example_url="https://api.trello.com/1/cards",
    ),
    WebhookTemplate(
        type=WebhookType.ASANA,
        name="Asana",
        description="Asana projelerine görev ekle",
        icon="✔️",
        briefing=(
            "Asana, kurumsal takımlar için bir proje ve görev yönetim platformudur. EchoDay "
            "görevlerinizi Asana projelerine aktarın."
        ),
        use_cases=[
            "Görevleri Asana'ya senkronize et",
            "Proje kilometre taşlarını güncelle",
            "Takım üyelerine görev ata",
            "Rapor ve analiz için veri topla",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. https://app.asana.com/0/my-apps adresini açın",
            '2. "Personal access tokens" bölümünü bulun',
            '3. "+ Create new token" butonuna tıklayın',
            '4. Token\'a bir isim verin (ör: "EchoDay Integration")',
            '5. "Create token" butonuna basın (token yalnızca bir kez gösterilir)',
            "6. Token'ı kopyalayıp güvenli bir yere kaydedin",
            "7. URL alanına https://app.asana.com/api/1.0/tasks yazın",
        ],
        example_url="https://app.asana.com/api/1.0/tasks",
    ),
    WebhookTemplate(
        type=WebhookType.N8N,
        name="n8n",
        description="Self-hosted workflow automation",
        icon="🤖",
        briefing=(
            "n8n, açık kaynaklı ve self-hosted bir otomasyon aracıdır. Kendi sunucunuzda "
            "çalıştırarak EchoDay'i 200+ hizmetle entegre edin."
        ),
        use_cases=[
            "Özel sunucuda otomasyon",
            "Gizlilik odaklı entegrasyonlar",
            "Karmaşık iş akışları",
            "Maliyet etkin çözüm",
        ],
        default_settings=WebhookSettings(**_AUTOMATION_DEFAULTS),
        setup_instructions=[
            "1. n8n sunucunuzu açın (veya cloud.n8n.io kullanın)",
            '2. "+ New Workflow" butonuna tıklayın',
            '3. "Webhook" node\'unu canvas\'a sürükleyin',
            '4. Node\'a tıklayıp "Webhook URL" değerini bulun',
            '5. "Copy URL" ile URL\'i kopyalayın',
            '6. Workflow\'u "Active" yapın',
            "7. URL'i webhook alanına yapıştırın",
        ],
        example_url="https://your-n8n-instance.com/webhook/your-webhook-id",
    ),
    WebhookTemplate(
        type=WebhookType.PABBLY,
        name="Pabbly Connect",
        description="Otomasyon ve entegrasyon platformu",
        icon="🔗",
        briefing=(
            "Pabbly Connect, uygun fiyatlı ve kullanıcı dostu bir otomasyon platformudur. "
            "EchoDay verilerinizi diğer uygulamalarla entegre edin."
        ),
        use_cases=[
            "Bütçe dostu otomasyon",
            "Çoklu uygulama bağlantısı",
            "E-posta pazarlama entegrasyonu",
            "CRM ve satış otomasyonu",
        ],
        default_settings=WebhookSettings(**_AUTOMATION_DEFAULTS),
        setup_instructions=[
            "1. https://www.pabbly.com/connect/ adresinden giriş yapın",
            '2. "Create Workflow" butonuna tıklayın',
            "3. Workflow'a bir isim verip kaydedin",
            '4. Trigger bölümünde "Webhook" seçin',
            "5. Oluşturulan webhook URL'ini kopyalayın",
            "6. Action kısmında hedef uygulamayı yapılandırın",
            "7. URL'i webhook alanına yapıştırın",
        ],
        example_url="https://connect.pabbly.com/workflow/sendwebhookdata/xxx",
    ),
    WebhookTemplate(
        type=WebhookType.GOOGLE_CHAT,
        name="Google Chat",
        description="Google Chat odalarına mesaj",
        icon="🗨️",
        briefing=(
            "Google Chat, Google Workspace'in mesajlaşma çözümüdür. Gmail, Calendar ve Drive ile "
            "entegre bir ortamda EchoDay bildirimlerini alın."
        ),
        use_cases=[
            "Workspace takımlarına bildirim",
            "Google ekosistemi entegrasyonu",
            "Kurumsal iletişim",
            "Proje odalarına güncellemeler",
        ],
        default_settings=WebhookSettings(**_CHAT_DEFAULTS),
        setup_instructions=[
            "1. chat.google.com adresini açın",
            "2. Webhook eklemek istediğiniz odaya (space) gidin",
            "3. Oda adının yanındaki üç nokta (...) menüsünü açın",
            '4. "Apps & integrations" seçeneğini bulun',
            '5. "Webhooks" sekmesinde "Add webhook" butonuna tıklayın',
            '6. Webhook\'a bir isim verin (ör: "EchoDay Bildirimleri")',
            '7. "Save" ile kaydedip URL\'i kopyalayın',
        ],
        example_url="https://chat.googleapis.com/v1/spaces/xxx/messages",
    ),
    WebhookTemplate(
        type=WebhookType.GENERIC,
        name="Özel Webhook",
        description="Kendi API endpoint'ini ekle",
        icon="🔧",
        briefing=(
            "Özel webhook ile kendi API endpoint'inizi bağlayabilirsiniz: kendi sistemleriniz, "
            "custom uygulamalarınız veya herhangi bir HTTP API."
        ),
        use_cases=[
            "Özel iç sistemlere bağlantı",
            "Custom API entegrasyonu",
            "Mikro servis mimarileri",
            "Geliştirme ve test ortamları",
        ],
        default_settings=WebhookSettings(**_GENERIC_DEFAULTS),
        setup_instructions=[
            "1. Kendi API endpoint'inizi hazırlayın",
            "2. Endpoint'in HTTP POST kabul ettiğinden emin olun",
            '3. JSON gövde kabul ettiğini doğrulayın (ör: {"event": "...", "data": {...}})',
            "4. Gerekirse kimlik bilgisini URL'e ekleyin",
            "5. Endpoint'i Postman veya curl ile test edin",
            "6. Tam URL'i webhook alanına yapıştırın",
            "Not: Bu seçenek teknik bilgi gerektirir",
        ],
        example_url="https://api.example.com/webhook",
    ),
)

_BY_TYPE: dict[WebhookType, WebhookTemplate] = {t.type: t for t in TEMPLATES}


def list_templates() -> list[WebhookTemplate]:
    """Copies of the catalogue; the table itself never changes."""
    return [t.model_copy(deep=True) for t in TEMPLATES]


def get_template(webhook_type: WebhookType | str) -> WebhookTemplate:
    return _BY_TYPE[WebhookType(webhook_type)].model_copy(deep=True)


def default_settings_for(webhook_type: WebhookType | str) -> WebhookSettings:
    """Fresh copy of the template defaults, safe to mutate."""
    return get_template(webhook_type).default_settings
