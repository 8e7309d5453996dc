"""
Route Resolver - Maps translation keys to site routes and display metadata.

Lookup order for a dot-path key:
  1. Exact match in KEY_TO_ROUTE
  2. Longest table key that is a string prefix of the input
  3. Home fallback ("/", "home", "Home", priority 1)

Category, component and priority are derived from secondary tables:
  - ROUTE_CATEGORIES: route glob patterns ("/academy/*") → category
  - ROUTE_COMPONENTS: route → page component name
  - KEY_PRIORITIES: key prefix buckets ("nav." → 10, ...)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteInfo:
    """Navigation metadata attached to an index entry."""
    route: str
    category: str
    component: str
    priority: int
    title: str


KEY_TO_ROUTE = {
    # Academy
    "nav.academy": "/academy/about",
    "nav.about_academy": "/academy/about",
    "nav.history": "/academy/history",
    "nav.mission_strategy": "/academy/mission",
    "nav.accreditation": "/academy/accreditation",
    "nav.kgafkis_in_numbers": "/academy/numbers",
    "nav.leadership": "/academy/leadership/rectorate",
    "nav.board_of_trustees": "/academy/leadership/board-of-trustees",
    "nav.audit_commission": "/academy/leadership/audit-commission",
    "nav.academic_council": "/academy/leadership/academic-council",
    "nav.rectorate": "/academy/leadership/rectorate",
    "nav.trade_union": "/academy/leadership/trade-union",
    "nav.commissions": "/academy/leadership/commissions",
    "nav.academic_structure": "/academy/structure/academic",
    "nav.administrative_structure": "/academy/structure/administrative",
    "nav.administrative_units": "/academy/structure/units",
    "nav.documents": "/academy/documents",

    # Admissions
    "nav.admissions": "/admissions/bachelor/info",
    "nav.bachelor": "/admissions/bachelor/info",
    "nav.general_info": "/admissions/bachelor/info",
    "nav.registration": "/admissions/bachelor/registration",
    "nav.international_applicants": "/admissions/bachelor/international",
    "nav.quotas": "/admissions/bachelor/quotas",
    "nav.contacts": "/admissions/bachelor/contacts",
    "nav.master_phd": "/admissions/master/info",
    "nav.doctorate": "/admissions/doctorate/info",
    "nav.college": "/admissions/college/info",

    # Education
    "nav.education": "/education/faculties/pedagogical",
    "nav.faculties": "/education/faculties/pedagogical",
    "nav.pedagogical_national_sports": "/education/faculties/pedagogical",
    "nav.coaching_faculty": "/education/faculties/coaching",
    "nav.military_training_physical_culture": "/education/faculties/military-training",
    "nav.correspondence_advanced_training": "/education/faculties/correspondence",
    "nav.general_faculty_departments": "/education/departments",
    "nav.master_program": "/education/faculties/master",
    "nav.college_physical_culture_sports": "/education/college/sports",

    # Science
    "nav.science": "/science/publications",
    "nav.scientific_publications": "/science/publications",
    "nav.vestnik": "/science/vestnik",
    "nav.web_of_science": "/science/web-of-science",
    "nav.scopus": "/science/scopus",
    "nav.research_and_technical_council": "/science/nts",
    "nav.student_scientific_society": "/science/ssu",

    # Students
    "nav.students": "/students/info",
    "nav.useful_information": "/students/info",
    "nav.students_with_disabilities": "/students/disabilities",
    "nav.student_council": "/students/council",
    "nav.exchange_programs": "/students/exchange",
    "nav.instructions": "/students/instructions",
    "nav.scholarship": "/students/scholarship",
    "nav.useful_links": "/students/links",
    "nav.ebilim_login": "/students/ebilim",
    "nav.visa_support": "/students/visa-support",

    # Contacts
    "nav.address_map": "/contacts/address",
    "nav.phones_email": "/contacts/contact-info",
    "nav.social_networks": "/contacts/social",

    # Page titles
    "academy.about.title": "/academy/about",
    "academy.history.title": "/academy/history",
    "academy.mission.title": "/academy/mission",
    "academy.accreditation.title": "/academy/accreditation",
    "academy.numbers.title": "/academy/numbers",

    "bachelor.info.title": "/admissions/bachelor/info",
    "bachelor.admission.title": "/admissions/bachelor/registration",
    "bachelorInternational.title": "/admissions/bachelor/international",
    "bachelorQuotas.title": "/admissions/bachelor/quotas",
    "bachelor.contacts.title": "/admissions/bachelor/contacts",
    "graduateStudies.title": "/admissions/master/info",
    "doctorate.title": "/admissions/doctorate/info",
    "collegeInfo.title": "/admissions/college/info",

    "pedagogicalSports.name": "/education/faculties/pedagogical",
    "coachingFaculty.name": "/education/faculties/coaching",
    "militaryTraining.name": "/education/faculties/military-training",
    "correspondenceTraining.name": "/education/faculties/correspondence",
    "generalDepartments.title": "/education/departments",
    "collegeSports.title": "/education/college/sports",
    "master.title": "/education/faculties/master",
    "doctorateProgram.title": "/education/faculties/doctorate",

    "science.sections.publications.title": "/science/publications",
    "vestnik.title": "/science/vestnik",
    "science.sections.webofscience.title": "/science/web-of-science",
    "science.sections.scopus.title": "/science/scopus",
    "science.sections.ipchain.title": "/science/ipchain",
    "nts.title": "/science/nts",
    "studentScientificSociety.title": "/science/ssu",

    "students.info.title": "/students/info",
    "students.disabilities.title": "/students/disabilities",
    "students.council.title": "/students/council",
    "students.clubs.title": "/students/clubs",
    "students.exchange.title": "/students/exchange",
    "students.instructions.title": "/students/instructions",
    "students.scholarships.title": "/students/scholarship",
    "students.links.title": "/students/links",
    "students.ebilim.title": "/students/ebilim",
    "visaSupport.title": "/students/visa-support",

    "contact.info.title": "/contacts/contact-info",
    "contact.map.title": "/contacts/address",
    "contact.social.title": "/contacts/social",
}

# Checked in order; "*" suffix means prefix match
ROUTE_CATEGORIES = {
    "/": "home",
    "/academy/*": "academy",
    "/admissions/*": "admissions",
    "/education/*": "education",
    "/science/*": "science",
    "/students/*": "students",
    "/contacts/*": "contacts",
    "/privacy": "legal",
    "/terms": "legal",
}

ROUTE_COMPONENTS = {
    "/": "Home",
    "/academy/about": "AcademyAbout",
    "/academy/history": "AcademyHistory",
    "/academy/mission": "AcademyMission",
    "/academy/accreditation": "AcademyAccreditation",
    "/academy/numbers": "AcademyNumbers",
    "/academy/documents": "AcademyDocuments",
    "/academy/leadership/rectorate": "AcademyLeadership",
    "/academy/structure/academic": "AcademyStructure",
    "/academy/leadership/board-of-trustees": "BoardOfTrustees",
    "/academy/leadership/audit-commission": "AuditCommission",
    "/academy/leadership/academic-council": "AcademicCouncil",
    "/academy/leadership/trade-union": "TradeUnion",
    "/academy/leadership/commissions": "Commissions",
    "/academy/structure/administrative": "AdministrativeStructure",
    "/academy/structure/units": "AdministrativeUnits",

    "/admissions/bachelor/info": "BachelorInfo",
    "/admissions/bachelor/registration": "BachelorRegistration",
    "/admissions/bachelor/international": "BachelorInternational",
    "/admissions/bachelor/quotas": "BachelorQuotasFull",
    "/admissions/bachelor/contacts": "BachelorContacts",
    "/admissions/master/info": "MasterInfo",
    "/admissions/college/info": "CollegeInfo",
    "/admissions/doctorate/info": "DoctorateInfo",

    "/education/faculties/pedagogical": "PedagogicalSports",
    "/education/faculties/coaching": "CoachingFaculty",
    "/education/faculties/military-training": "MilitaryTraining",
    "/education/faculties/correspondence": "CorrespondenceTraining",
    "/education/departments": "GeneralDepartments",
    "/education/college/sports": "CollegeSports",
    "/education/faculties/master": "MasterProgram",
    "/education/faculties/doctorate": "DoctorateProgram",

    "/science/publications": "ScientificPublications",
    "/science/vestnik": "Vestnik",
    "/science/web-of-science": "WebOfScience",
    "/science/scopus": "Scopus",
    "/science/ipchain": "Ipchain",
    "/science/nts": "ScientificCouncil",
    "/science/nts-committee": "NTSCommittee",
    "/science/ssu": "StudentScientificSociety",

    "/students/info": "UsefulInfo",
    "/students/disabilities": "StudentsDisabilities",
    "/students/council": "StudentCouncil",
    "/students/clubs": "StudentClubs",
    "/students/exchange": "ExchangePrograms",
    "/students/instructions": "Instructions",
    "/students/scholarship": "Scholarship",
    "/students/links": "UsefulLinks",
    "/students/ebilim": "EbilimLogin",
    "/students/visa-support": "VisaSupport",
    "/students/contact-info": "StudentContactInfo",
    "/students/social": "StudentSocial",

    "/contacts/address": "AddressMap",
    "/contacts/contact-info": "ContactInfo",
    "/contacts/social": "SocialNetworks",

    "/privacy": "PrivacyPolicy",
    "/terms": "TermsOfService",
}

KEY_TITLES = {
    "nav.about_academy": "Об академии",
    "nav.history": "История",
    "nav.mission_strategy": "Миссия и стратегия",
    "nav.accreditation": "Аккредитация",
    "nav.kgafkis_in_numbers": "КГАФКиС в цифрах",
    "nav.leadership": "Руководство",
    "nav.documents": "Документы",
    "nav.bachelor": "Бакалавриат",
    "nav.master_phd": "Магистратура",
    "nav.doctorate": "Докторантура",
    "nav.college": "Колледж",
    "nav.faculties": "Факультеты",
    "nav.science": "Наука",
    "nav.students": "Студентам",
    "nav.contacts": "Контакты",
}

KEY_PRIORITIES = {
    "nav.": 10,
    "academy.": 9,
    "bachelor.": 8,
    "education.": 7,
    "science.": 6,
    "students.": 5,
    "contact.": 4,
}

HOME_ROUTE = RouteInfo(
    route="/",
    category="home",
    component="Home",
    priority=1,
    title="Главная",
)


class RouteResolver:
    """
    Resolve dot-path keys to RouteInfo using static lookup tables.

    The tables default to the module-level constants; passing custom
    tables is mostly useful for tests and alternate site maps.
    """

    def __init__(
        self,
        key_routes: dict[str, str] | None = None,
        categories: dict[str, str] | None = None,
        components: dict[str, str] | None = None,
        priorities: dict[str, int] | None = None,
        titles: dict[str, str] | None = None,
    ):
        self.key_routes = key_routes if key_routes is not None else KEY_TO_ROUTE
        self.categories = categories if categories is not None else ROUTE_CATEGORIES
        self.components = components if components is not None else ROUTE_COMPONENTS
        self.priorities = priorities if priorities is not None else KEY_PRIORITIES
        self.titles = titles if titles is not None else KEY_TITLES

        # Longest first; sorted() is stable so equal lengths keep table order
        self._prefixes = sorted(self.key_routes, key=len, reverse=True)

    def resolve(self, key: str) -> RouteInfo:
        """
        Resolve a translation key to its route metadata.

        Args:
            key: Dot-path key (e.g. "nav.about_academy")

        Returns:
            RouteInfo for the exact or longest-prefix match, or HOME_ROUTE
        """
        matched = key if key in self.key_routes else self._longest_prefix(key)
        if matched is None:
            return HOME_ROUTE

        route = self.key_routes[matched]
        return RouteInfo(
            route=route,
            category=self.category_for_route(route),
            component=self.component_for_route(route),
            priority=self.priority_for_key(matched),
            title=self.title_for_key(matched),
        )

    def _longest_prefix(self, key: str) -> str | None:
        for prefix in self._prefixes:
            if key.startswith(prefix):
                return prefix
        return None

    def category_for_route(self, route: str) -> str:
        """First matching glob pattern wins; "other" when none match."""
        for pattern, category in self.categories.items():
            if pattern.endswith("*") and route.startswith(pattern[:-1]):
                return category
            if route == pattern:
                return category
        return "other"

    def component_for_route(self, route: str) -> str:
        return self.components.get(route, "Page")

    def priority_for_key(self, key: str) -> int:
        for prefix, priority in self.priorities.items():
            if key.startswith(prefix):
                return priority
        return 1

    def title_for_key(self, key: str) -> str:
        """Known page title, or the last key segment."""
        return self.titles.get(key) or key.split(".")[-1]


_default_resolver = RouteResolver()


def get_route_info(key: str) -> RouteInfo:
    """Resolve a key against the default site tables."""
    return _default_resolver.resolve(key)
