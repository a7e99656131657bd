from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    # Documents are hand-edited; keep any keys we don't model so reads stay verbatim.
    model_config = ConfigDict(extra="allow")


class Product(_Record):
    image: str
    name: str
    price: str
    category: str
    id: str
    description: str


class ProductList(_Record):
    products: list[Product]

    def matching_category(self, category: str) -> list[Product]:
        """Products whose category equals `category` ignoring case, in document order."""
        wanted = category.lower()
        return [p for p in self.products if p.category.lower() == wanted]

    def first_with_id(self, product_id: str) -> Product | None:
        """
        First product whose id equals `product_id` ignoring case.
        Duplicate ids are not rejected; document order breaks the tie.
        """
        wanted = product_id.lower()
        return next((p for p in self.products if p.id.lower() == wanted), None)


class Faq(_Record):
    question: str
    answer: str


class FaqList(_Record):
    faqs: list[Faq]


class Promo(_Record):
    start_date: str
    end_date: str
    sale_description: str


class PromoList(_Record):
    promos: list[Promo]


class FormSubmission(BaseModel):
    name: str
    email: str
    feedback: str
    phone: str = ""


class SubmissionLog(_Record):
    # Earlier entries are kept exactly as stored; only new ones go through FormSubmission.
    form_submissions: list[dict[str, Any]] = Field(default_factory=list)

    def append(self, submission: FormSubmission) -> None:
        self.form_submissions.append(submission.model_dump())
