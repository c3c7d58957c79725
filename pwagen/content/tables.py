"""Industry content tables.

``INDUSTRY_CONTENT`` maps an industry key to per-page raw content.  The
``"default"`` entry is a first-class table row: it authors every page in
``ALL_PAGE_NAMES`` and is used both for unknown industries and for pages an
industry does not override.

Text values may contain ``{business_name}`` and ``{description}``
placeholders which the resolver fills in.  Cards are written as
``(title, description)`` pairs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_INDUSTRY = "default"

BASE_PAGE_NAMES: tuple[str, ...] = ("home", "about", "services")

ALL_PAGE_NAMES: tuple[str, ...] = (
    "home",
    "about",
    "services",
    "contact",
    "gallery",
    "testimonials",
    "login",
    "register",
    "profile",
    "reviews",
    "chat",
    "search",
    "payments",
    "booking",
    "analytics",
    "locations",
)

# Alternative spellings folded onto a table key.
INDUSTRY_ALIASES: Mapping[str, str] = MappingProxyType({
    "cybersecurity": "cyber-security",
    "security": "cyber-security",
    "infosec": "cyber-security",
    "ecommerce": "e-commerce",
    "retail": "e-commerce",
    "shop": "e-commerce",
    "tech": "technology",
    "saas": "technology",
    "software": "technology",
    "medical": "healthcare",
    "health": "healthcare",
    "law": "legal",
    "law-firm": "legal",
    "food": "restaurant",
    "cafe": "restaurant",
    "local-business": "small-business",
    "designer": "portfolio",
    "creative": "portfolio",
    "freelancer": "portfolio",
})


_DEFAULT: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name}",
        "subtitle": "Welcome to {business_name} - Your trusted partner",
        "body": "{description}",
        "cta": "Get Started",
        "cards": [
            ("Quality Service", "We hold every project to the highest standard."),
            ("Professional Team", "Experienced people who care about your goals."),
            ("Customer Focused", "Your satisfaction guides everything we do."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Learn more about our company and mission",
        "body": "{description}",
        "items": [
            "To deliver outstanding results while building lasting relationships with our clients.",
            "To be the leading provider of innovative solutions in our industry.",
        ],
        "cards": [
            ("Integrity", "We believe in integrity as a core principle of our business."),
            ("Excellence", "We strive for excellence in everything we do."),
            ("Innovation", "We embrace innovation to serve our clients better."),
        ],
    },
    "services": {
        "title": "Our Services",
        "subtitle": "Comprehensive solutions tailored to your needs",
        "cta": "Learn More",
        "items": ["Expert consultation", "Custom solutions", "Ongoing support"],
        "cards": [
            ("Professional Consulting", "Expert advice and guidance for your business."),
            ("Quality Solutions", "Tailored solutions that meet your specific needs."),
            ("Customer Support", "Dedicated support when you need it most."),
        ],
    },
    "contact": {
        "title": "Contact Us",
        "subtitle": "Get in touch with the {business_name} team",
        "body": "We'll get back to you within 24 hours.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) 123-4567"),
            ("Email", "contact@example.com"),
            ("Address", "123 Main Street, Your City"),
            ("Hours", "Mon-Fri: 9AM-6PM"),
        ],
    },
    "gallery": {
        "title": "Gallery",
        "subtitle": "A look at our work",
        "items": ["All", "Work", "Team", "Office"],
        "cards": [
            ("Project Showcase", "Work"),
            ("Client Delivery", "Work"),
            ("Team Photo", "Team"),
            ("Office Space", "Office"),
        ],
    },
    "testimonials": {
        "title": "What Our Clients Say",
        "subtitle": "Real feedback from the people we work with",
        "cards": [
            ("John Smith", "Outstanding service and professional approach."),
            ("Maria Gonzalez", "Highly recommended for their expertise."),
            ("Alex Johnson", "Excellent results and great communication."),
        ],
    },
    "login": {
        "title": "Welcome Back",
        "subtitle": "Sign in to your {business_name} account",
        "cta": "Sign In",
    },
    "register": {
        "title": "Create Account",
        "subtitle": "Join {business_name} today",
        "cta": "Create Account",
    },
    "profile": {
        "title": "My Profile",
        "subtitle": "Manage your {business_name} account details",
        "cta": "Save Changes",
        "items": ["Account details", "Notification preferences", "Security"],
    },
    "reviews": {
        "title": "Customer Reviews",
        "subtitle": "See what others are saying about {business_name}",
        "items": ["4.8", "127"],
        "cards": [
            ("John Smith", "Excellent service and professional team!"),
            ("Emma Wilson", "Quick, friendly and reliable. Would recommend."),
        ],
    },
    "chat": {
        "title": "Live Chat",
        "subtitle": "Talk to the {business_name} team in real time",
        "body": "Hi! How can we help you today?",
        "cta": "Send",
        "items": ["Opening hours", "Pricing", "Talk to a person"],
    },
    "search": {
        "title": "Search",
        "subtitle": "Find what you need across {business_name}",
        "cta": "Search",
        "items": ["Services", "Pricing", "Support", "About us"],
    },
    "payments": {
        "title": "Payments",
        "subtitle": "Simple and secure checkout",
        "body": "All payments are processed over an encrypted connection.",
        "cta": "Pay Now",
        "cards": [
            ("Basic", "$29 / month"),
            ("Professional", "$79 / month"),
            ("Enterprise", "Contact us"),
        ],
    },
    "booking": {
        "title": "Book an Appointment",
        "subtitle": "Choose a time that works for you",
        "cta": "Confirm Booking",
        "items": ["Consultation", "Follow-up", "Full Service"],
    },
    "analytics": {
        "title": "Analytics",
        "subtitle": "Key numbers for {business_name} at a glance",
        "cards": [
            ("Visitors", "12,480"),
            ("Conversions", "3.2%"),
            ("Avg. Session", "4m 12s"),
            ("Returning", "41%"),
        ],
    },
    "locations": {
        "title": "Our Locations",
        "subtitle": "Find a {business_name} location near you",
        "cta": "Use My Location",
        "cards": [
            ("Main Office", "123 Main Street, Your City"),
            ("Downtown", "45 Market Square, Your City"),
        ],
    },
}


_SMALL_BUSINESS: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name}",
        "subtitle": "Quality service with a personal touch",
        "cta": "Get in Touch",
        "cards": [
            ("Personalized Service", "We get to know you and your needs."),
            ("Local Knowledge", "Rooted in the community we serve."),
            ("Quality Guarantee", "We stand behind every job."),
        ],
    },
    "services": {
        "title": "Our Services",
        "subtitle": "Everything you need, from people you know",
        "items": ["Free estimates", "Flexible scheduling", "Competitive pricing"],
        "cards": [
            ("Consultation Services", "Talk through your project with an expert."),
            ("Custom Solutions", "Work shaped around your requirements."),
            ("Maintenance & Support", "Ongoing care after the job is done."),
        ],
    },
}


_TECHNOLOGY: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name} - Innovation at Scale",
        "subtitle": "Cutting-edge technology solutions for modern businesses",
        "cta": "Start Your Project",
        "cards": [
            ("Innovative Solutions", "Modern tooling and proven engineering practice."),
            ("Scalable Architecture", "Systems that grow with your business."),
            ("Expert Development Team", "Senior engineers on every project."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Engineering that moves businesses forward",
        "body": "{business_name} delivers innovative technology solutions that help businesses scale and succeed in the digital age.",
        "items": [
            "To turn complex problems into reliable, elegant software.",
            "To be the technology partner our clients trust first.",
        ],
        "cards": [
            ("Craft", "We write software we are proud to maintain."),
            ("Curiosity", "We keep learning so our clients stay ahead."),
            ("Ownership", "We see every project through to production."),
        ],
    },
    "services": {
        "title": "Our Services",
        "subtitle": "From prototype to production",
        "items": ["Discovery workshop", "Agile delivery", "Post-launch support"],
        "cards": [
            ("Software Development", "Custom software solutions tailored to your needs."),
            ("Cloud Solutions", "Scalable cloud infrastructure and services."),
            ("AI & Machine Learning", "Intelligent automation and data-driven insights."),
            ("DevOps Services", "Automated pipelines and reliable operations."),
        ],
    },
    "testimonials": {
        "title": "What Our Clients Say",
        "subtitle": "Teams that ship with {business_name}",
        "cards": [
            ("David Wilson", "Their technical expertise transformed our business operations."),
            ("Emily Davis", "Outstanding development team with innovative solutions."),
            ("James Brown", "Reliable, efficient, and always ahead of the curve."),
        ],
    },
    "contact": {
        "title": "Contact Us",
        "subtitle": "Tell us about your project",
        "body": "A solutions engineer will reply within one business day.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) TECH-NOW"),
            ("Email", "hello@techcompany.com"),
            ("Address", "123 Innovation Drive, Tech Valley"),
            ("Hours", "Mon-Fri: 9AM-6PM"),
        ],
    },
}


_HEALTHCARE: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name} - Your Health, Our Priority",
        "subtitle": "Comprehensive healthcare services with compassionate care",
        "cta": "Schedule Appointment",
        "cards": [
            ("Compassionate Care", "Patients are treated as people, not cases."),
            ("Latest Medical Technology", "Modern diagnostics and treatment."),
            ("Experienced Professionals", "Board-certified physicians and staff."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Patient-centered care since day one",
        "body": "{business_name} provides comprehensive healthcare services with a focus on compassionate, patient-centered care and the latest medical innovations.",
        "items": [
            "To improve the health of every patient we serve.",
            "To be the most trusted name in care in our community.",
        ],
        "cards": [
            ("Compassion", "Kindness in every interaction."),
            ("Safety", "Rigorous standards for every procedure."),
            ("Access", "Care that fits into real lives."),
        ],
    },
    "services": {
        "title": "Our Services",
        "subtitle": "Care for every stage of life",
        "items": ["Same-week appointments", "Insurance accepted", "Telehealth available"],
        "cards": [
            ("Primary Care", "Comprehensive medical care for all ages."),
            ("Specialist Services", "Expert care from certified specialists."),
            ("Preventive Care", "Proactive health maintenance and wellness programs."),
            ("Emergency Services", "Urgent care when you need it."),
        ],
    },
    "testimonials": {
        "title": "Patient Stories",
        "subtitle": "Why patients choose {business_name}",
        "cards": [
            ("Mary Thompson", "Excellent care and very professional staff."),
            ("Robert Garcia", "They truly care about their patients' wellbeing."),
            ("Jennifer Lee", "Best healthcare experience I've ever had."),
        ],
    },
    "contact": {
        "title": "Contact Us",
        "subtitle": "Book a visit or ask a question",
        "body": "For emergencies, call 911 or visit the nearest emergency room.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) HEALTH-1"),
            ("Email", "appointments@healthcare.com"),
            ("Address", "123 Medical Center Blvd, Health City"),
            ("Hours", "Mon-Fri: 8AM-5PM, Emergency: 24/7"),
        ],
    },
    "booking": {
        "title": "Schedule an Appointment",
        "subtitle": "Pick a visit type and a time",
        "cta": "Request Appointment",
        "items": ["New Patient Visit", "Annual Check-up", "Specialist Referral"],
    },
}


_RESTAURANT: dict[str, dict[str, Any]] = {
    "home": {
        "title": "Welcome to {business_name}",
        "subtitle": "Exceptional dining experience with fresh, locally-sourced ingredients",
        "cta": "Make Reservation",
        "cards": [
            ("Fresh Local Ingredients", "Sourced from farms we know by name."),
            ("Expert Culinary Team", "Dishes crafted with care every night."),
            ("Memorable Dining Experience", "Warm service in a welcoming room."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Our kitchen, our story",
        "body": "{business_name} offers an exceptional dining experience with fresh, locally-sourced ingredients and expertly crafted dishes in a warm, welcoming atmosphere.",
        "items": [
            "To serve honest food made from the best ingredients.",
            "To be the table our neighbours come back to.",
        ],
        "cards": [
            ("Seasonality", "Our menu follows the harvest."),
            ("Hospitality", "Every guest is treated like family."),
            ("Craft", "Technique in service of flavour."),
        ],
    },
    "services": {
        "title": "Dining & Events",
        "subtitle": "More than a meal",
        "items": ["Vegetarian options", "Seasonal menu", "Private rooms"],
        "cards": [
            ("Fine Dining", "Exquisite cuisine crafted by our expert chefs."),
            ("Catering", "Full-service catering for your special events."),
            ("Private Events", "Intimate dining experiences for special occasions."),
            ("Wine Selection", "A cellar chosen to match the menu."),
        ],
    },
    "testimonials": {
        "title": "What Our Guests Say",
        "subtitle": "Reviews from our regulars",
        "cards": [
            ("Sarah Johnson", "The food was absolutely incredible! Best dining experience in town."),
            ("Mike Chen", "Amazing atmosphere and exceptional service. Highly recommend!"),
            ("Lisa Rodriguez", "Every dish was a masterpiece. Can't wait to come back!"),
        ],
    },
    "contact": {
        "title": "Reservations & Contact",
        "subtitle": "We look forward to hosting you",
        "body": "Parties of eight or more, please call ahead.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) DINE-HERE"),
            ("Email", "reservations@restaurant.com"),
            ("Address", "123 Culinary Street, Food City"),
            ("Hours", "Tue-Sun: 5PM-10PM"),
        ],
    },
    "gallery": {
        "title": "Gallery",
        "subtitle": "From our kitchen and dining room",
        "items": ["All", "Dishes", "Interior", "Events"],
        "cards": [
            ("Signature Dish", "Dishes"),
            ("Seasonal Dessert", "Dishes"),
            ("Main Dining Room", "Interior"),
            ("Private Dinner", "Events"),
        ],
    },
    "booking": {
        "title": "Reserve a Table",
        "subtitle": "Book your table at {business_name}",
        "cta": "Reserve",
        "items": ["Dinner for Two", "Family Table", "Private Room"],
    },
}


_CYBER_SECURITY: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name} - Advanced Cybersecurity Solutions",
        "subtitle": "Protecting your digital assets with cutting-edge security technology",
        "cta": "Secure Your Business",
        "cards": [
            ("Advanced Threat Detection", "Find intrusions before they become breaches."),
            ("24/7 Security Monitoring", "Analysts watching your systems around the clock."),
            ("Compliance Expertise", "Audit-ready controls for every major framework."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Security experts on your side",
        "body": "{business_name} is a leading cybersecurity firm dedicated to protecting organizations from digital threats through innovative security solutions and expert consultation.",
        "items": [
            "To make strong security practical for every organization.",
            "To be the first call when it matters most.",
        ],
        "cards": [
            ("Vigilance", "Threats never sleep, so neither do we."),
            ("Discretion", "Your data and findings stay confidential."),
            ("Expertise", "Certified professionals on every engagement."),
        ],
    },
    "services": {
        "title": "Security Services",
        "subtitle": "Defense in depth for your organization",
        "items": ["Certified testers", "Detailed remediation reports", "Retesting included"],
        "cards": [
            ("Security Audits", "Comprehensive security assessments and vulnerability testing."),
            ("Penetration Testing", "Ethical hacking to identify and fix security weaknesses."),
            ("Compliance Solutions", "Ensure regulatory compliance with industry standards."),
            ("Incident Response", "24/7 rapid response to security threats and breaches."),
            ("Security Training", "Employee education and security awareness programs."),
        ],
    },
    "testimonials": {
        "title": "Client Testimonials",
        "subtitle": "Organizations secured by {business_name}",
        "cards": [
            ("Michael Stevens", "Their security audit revealed critical vulnerabilities we didn't know existed. Excellent work!"),
            ("Sarah Mitchell", "Professional team that takes cybersecurity seriously. Our data is now completely secure."),
            ("David Chen", "Best cybersecurity consultants in the business. Highly recommended for enterprise security."),
        ],
    },
    "contact": {
        "title": "Contact Our Security Team",
        "subtitle": "Report an incident or request an assessment",
        "body": "Active incident? Call our emergency line for immediate response.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) SEC-URITY"),
            ("Email", "security@cybersecurepro.com"),
            ("Address", "123 Cyber Lane, Tech City"),
            ("Hours", "24/7 Emergency Response"),
        ],
    },
}


_LEGAL: dict[str, dict[str, Any]] = {
    "home": {
        "title": "{business_name} - Trusted Legal Counsel",
        "subtitle": "Clear advice and strong representation when it matters",
        "cta": "Book a Consultation",
        "cards": [
            ("Experienced Attorneys", "Decades of combined courtroom experience."),
            ("Clear Communication", "Plain-language advice at every step."),
            ("Client-First Approach", "Your interests come before anything else."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Advocates for our clients",
        "body": "{business_name} provides practical legal counsel to individuals and businesses, combining deep expertise with personal attention.",
        "items": [
            "To make quality legal help accessible and understandable.",
            "To be the firm clients recommend to their families.",
        ],
        "cards": [
            ("Integrity", "Honest assessments, even when they are hard."),
            ("Diligence", "Thorough preparation for every matter."),
            ("Confidentiality", "Your matters stay private."),
        ],
    },
    "services": {
        "title": "Practice Areas",
        "subtitle": "Counsel across the matters that matter most",
        "items": ["Free initial consultation", "Transparent fees", "Flexible meeting times"],
        "cards": [
            ("Business Law", "Formation, contracts and commercial disputes."),
            ("Family Law", "Divorce, custody and mediation."),
            ("Estate Planning", "Wills, trusts and probate."),
            ("Real Estate", "Transactions, leases and title issues."),
        ],
    },
    "testimonials": {
        "title": "Client Testimonials",
        "subtitle": "What clients say about {business_name}",
        "cards": [
            ("Karen White", "They explained every option and fought hard for us."),
            ("Tom Alvarez", "Professional, responsive and genuinely caring."),
            ("Priya Nair", "Our business contracts have never been stronger."),
        ],
    },
    "contact": {
        "title": "Contact the Firm",
        "subtitle": "Schedule a confidential consultation",
        "body": "Contacting us does not create an attorney-client relationship.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) LAW-FIRM"),
            ("Email", "counsel@lawfirm.com"),
            ("Address", "500 Justice Avenue, Suite 200"),
            ("Hours", "Mon-Fri: 8:30AM-5:30PM"),
        ],
    },
}


_E_COMMERCE: dict[str, dict[str, Any]] = {
    "home": {
        "title": "Discover Amazing Products at {business_name}",
        "subtitle": "Quality products, great prices, fast delivery",
        "cta": "Shop Now",
        "cards": [
            ("Free Shipping", "On every order over $50."),
            ("Easy Returns", "30 days, no questions asked."),
            ("Secure Checkout", "Your payment details stay protected."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Your one-stop shopping destination",
        "body": "{business_name} brings together carefully selected products from trusted brands, with service that makes shopping easy.",
        "items": [
            "To make great products easy to find and affordable.",
            "To be the store customers return to first.",
        ],
        "cards": [
            ("Curation", "Every product is chosen with care."),
            ("Value", "Fair prices every day."),
            ("Service", "Real people ready to help."),
        ],
    },
    "services": {
        "title": "Shop by Category",
        "subtitle": "Find exactly what you are looking for",
        "items": ["New arrivals weekly", "Member discounts", "Gift wrapping"],
        "cards": [
            ("Electronics & Gadgets", "The latest devices and accessories."),
            ("Fashion & Apparel", "Styles for every season."),
            ("Home & Garden", "Everything for the place you love."),
            ("Health & Beauty", "Care products from trusted brands."),
        ],
    },
    "testimonials": {
        "title": "Happy Customers",
        "subtitle": "Reviews from {business_name} shoppers",
        "cards": [
            ("Olivia Park", "Fast shipping and the quality is excellent."),
            ("Marcus Reed", "Great prices and super easy returns."),
            ("Hannah Cole", "My go-to store for gifts."),
        ],
    },
    "contact": {
        "title": "Customer Service",
        "subtitle": "Questions about an order? We're here to help",
        "body": "Have your order number ready for faster help.",
        "cta": "Send Message",
        "cards": [
            ("Phone", "(555) SHOP-NOW"),
            ("Email", "support@shop.com"),
            ("Address", "77 Commerce Way, Market Town"),
            ("Hours", "Every day: 8AM-10PM"),
        ],
    },
    "payments": {
        "title": "Checkout",
        "subtitle": "Complete your order securely",
        "body": "We accept all major cards and digital wallets.",
        "cta": "Place Order",
        "cards": [
            ("Standard Delivery", "Free over $50"),
            ("Express Delivery", "$9.99"),
            ("Next-Day Delivery", "$19.99"),
        ],
    },
}


_PORTFOLIO: dict[str, dict[str, Any]] = {
    "home": {
        "title": "Creating Digital Experiences",
        "subtitle": "{business_name} - design that inspires, code that ships",
        "cta": "View My Work",
        "cards": [
            ("User Experience Design", "Interfaces shaped around real people."),
            ("Frontend Development", "Fast, accessible sites and apps."),
            ("Brand Identity", "Logos, guidelines and visual systems."),
            ("Mobile App Design", "Native-feeling experiences on every device."),
        ],
    },
    "about": {
        "title": "About {business_name}",
        "subtitle": "Bringing ideas to life",
        "body": "{description}",
        "items": [
            "To turn ambitious ideas into work people enjoy using.",
            "To be the creative partner clients come back to.",
        ],
        "cards": [
            ("Creativity", "Fresh ideas for every brief."),
            ("Craft", "Attention to detail down to the pixel."),
            ("Collaboration", "Clients are part of the process from day one."),
        ],
    },
    "services": {
        "title": "What I Do",
        "subtitle": "Creative solutions for modern challenges",
        "items": ["Discovery workshops", "Fixed-price projects", "Ongoing retainers"],
        "cards": [
            ("Web Development", "Marketing sites and web applications."),
            ("Brand Identity", "Logos, guidelines and materials."),
            ("Digital Marketing", "Launch campaigns that reach the right audience."),
        ],
    },
    "gallery": {
        "title": "Selected Work",
        "subtitle": "Recent projects from {business_name}",
        "items": ["All", "Web Design", "Mobile Design", "Branding"],
        "cards": [
            ("E-commerce Platform Redesign", "Web Design"),
            ("Mobile Banking App", "Mobile Design"),
            ("Brand Identity System", "Branding"),
        ],
    },
    "testimonials": {
        "title": "Kind Words",
        "subtitle": "What clients say about working together",
        "cards": [
            ("Startup Founder", "Exceptional creativity and attention to detail!"),
            ("Product Manager", "Delivered beyond our expectations on time and budget."),
            ("Marketing Lead", "Professional, responsive, and incredibly talented."),
        ],
    },
    "contact": {
        "title": "Start a Project",
        "subtitle": "Tell me about your next idea",
        "body": "I usually reply within one business day.",
        "cta": "Send Message",
        "cards": [
            ("Email", "hello@portfolio.dev"),
            ("Availability", "Booking projects two months out"),
            ("Location", "Remote, worldwide"),
        ],
    },
}


def _freeze(table: dict[str, dict[str, dict[str, Any]]]) -> Mapping[str, Mapping[str, Mapping[str, Any]]]:
    def _page(fields: dict[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType({
            key: tuple(value) if isinstance(value, list) else value
            for key, value in fields.items()
        })

    return MappingProxyType({
        industry: MappingProxyType({page: _page(fields) for page, fields in pages.items()})
        for industry, pages in table.items()
    })


INDUSTRY_CONTENT = _freeze({
    DEFAULT_INDUSTRY: _DEFAULT,
    "small-business": _SMALL_BUSINESS,
    "technology": _TECHNOLOGY,
    "healthcare": _HEALTHCARE,
    "restaurant": _RESTAURANT,
    "cyber-security": _CYBER_SECURITY,
    "legal": _LEGAL,
    "e-commerce": _E_COMMERCE,
    "portfolio": _PORTFOLIO,
})

# Only the frozen table is public.
del (
    _DEFAULT, _SMALL_BUSINESS, _TECHNOLOGY, _HEALTHCARE, _RESTAURANT,
    _CYBER_SECURITY, _LEGAL, _E_COMMERCE, _PORTFOLIO,
)
