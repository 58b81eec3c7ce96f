from itertools import permutations

import pytest
from pydantic import ValidationError as PydanticValidationError

from maradocs.models.common import PdfPageSize
from maradocs.models.email import EmailValidateResponse, EmailValidateResponseOk
from maradocs.models.img import (
    EmbeddingOptions,
    ImgFindDocumentsResponse,
    ImgToPdfOptions,
    ImgValidateResponse,
    Quadrilateral,
    RelativePosition,
)
from maradocs.models.pdf import PdfComposePdf, PdfOrientationResponse

CORNERS = [
    RelativePosition(x=0.1, y=0.2),
    RelativePosition(x=0.9, y=0.1),
    RelativePosition(x=0.85, y=0.95),
    RelativePosition(x=0.05, y=0.8),
]


def _satisfies_corner_order(quad: Quadrilateral) -> bool:
    return (
        quad.top_left.x <= quad.top_right.x
        and quad.bottom_left.x <= quad.bottom_right.x
        and quad.top_left.y <= quad.bottom_left.y
        and quad.top_right.y <= quad.bottom_right.y
    )


class TestQuadrilateralFromUnsorted:
    @pytest.mark.parametrize("points", list(permutations(CORNERS)))
    def test_every_permutation_yields_same_ordered_quad(
        self, points: tuple[RelativePosition, ...]
    ) -> None:
        quad = Quadrilateral.from_unsorted(points)

        assert _satisfies_corner_order(quad)
        assert quad.top_left == RelativePosition(x=0.1, y=0.2)
        assert quad.top_right == RelativePosition(x=0.9, y=0.1)
        assert quad.bottom_right == RelativePosition(x=0.85, y=0.95)
        assert quad.bottom_left == RelativePosition(x=0.05, y=0.8)

    def test_axis_aligned_square(self) -> None:
        quad = Quadrilateral.from_unsorted(
            [
                RelativePosition(x=1.0, y=1.0),
                RelativePosition(x=0.0, y=0.0),
                RelativePosition(x=0.0, y=1.0),
                RelativePosition(x=1.0, y=0.0),
            ]
        )

        assert quad.top_left == RelativePosition(x=0.0, y=0.0)
        assert quad.bottom_right == RelativePosition(x=1.0, y=1.0)

    @pytest.mark.parametrize("count", [0, 3, 5])
    def test_requires_four_points(self, count: int) -> None:
        with pytest.raises(ValueError, match="4 points"):
            Quadrilateral.from_unsorted([RelativePosition(x=0.5, y=0.5)] * count)


class TestQuadrilateralValidation:
    def test_rejects_swapped_corners(self) -> None:
        with pytest.raises(PydanticValidationError, match="not in correct positions"):
            Quadrilateral(
                top_left=RelativePosition(x=0.9, y=0.1),
                top_right=RelativePosition(x=0.1, y=0.1),
                bottom_right=RelativePosition(x=0.9, y=0.9),
                bottom_left=RelativePosition(x=0.1, y=0.9),
            )

    def test_rejects_coordinates_outside_unit_range(self) -> None:
        with pytest.raises(PydanticValidationError):
            RelativePosition(x=1.2, y=0.5)

    def test_detection_response_parses_quads_in_order(self) -> None:
        square = {
            "top_left": {"x": 0.0, "y": 0.0},
            "top_right": {"x": 0.5, "y": 0.0},
            "bottom_right": {"x": 0.5, "y": 0.5},
            "bottom_left": {"x": 0.0, "y": 0.5},
        }
        shifted = {
            "top_left": {"x": 0.5, "y": 0.5},
            "top_right": {"x": 1.0, "y": 0.5},
            "bottom_right": {"x": 1.0, "y": 1.0},
            "bottom_left": {"x": 0.5, "y": 1.0},
        }
        response = ImgFindDocumentsResponse.model_validate(
            {
                "documents": [
                    {"quadrilateral": square, "confidence": 0.97},
                    {"quadrilateral": shifted, "confidence": 0.71},
                ]
            }
        )

        assert [d.confidence for d in response.documents] == [0.97, 0.71]
        assert response.documents[1].quadrilateral.top_left.x == 0.5


class TestImgToPdfOptions:
    def test_defaults(self) -> None:
        options = ImgToPdfOptions()

        assert options.img_quality == 70
        assert options.img_color == "original"
        assert options.max_size == PdfPageSize(width=210, height=297)
        assert options.max_dpi == 120
        assert options.min_dpi == 100
        assert options.embed_in_blank_page is None

    def test_rejects_max_dpi_below_min_dpi(self) -> None:
        with pytest.raises(PydanticValidationError, match="max_dpi"):
            ImgToPdfOptions(max_dpi=90, min_dpi=100)

    def test_rejects_embedding_page_smaller_than_max_size(self) -> None:
        with pytest.raises(PydanticValidationError, match="embedding size"):
            ImgToPdfOptions(
                embed_in_blank_page=EmbeddingOptions(size=PdfPageSize(width=100, height=100))
            )

    def test_accepts_embedding_page_equal_to_max_size(self) -> None:
        options = ImgToPdfOptions(
            embed_in_blank_page=EmbeddingOptions(size=PdfPageSize(width=210, height=297))
        )
        assert options.embed_in_blank_page.position == "center"


class TestPdfModels:
    def test_compose_source_omits_pages_when_serialized(self) -> None:
        dumped = PdfComposePdf(pdf_handle="pdf-1").model_dump(mode="json", exclude_none=True)
        assert dumped == {"pdf_handle": "pdf-1"}

    def test_orientation_pairs_per_page(self) -> None:
        response = PdfOrientationResponse.model_validate(
            {"orientations": [[90, 0.93], [0, 0.99]], "rotated_pdf_handle": "rot-1"}
        )
        assert response.orientations == [(90, 0.93), (0, 0.99)]

    def test_orientation_rejects_non_discrete_angle(self) -> None:
        with pytest.raises(PydanticValidationError):
            PdfOrientationResponse.model_validate(
                {"orientations": [[45, 0.5]], "rotated_pdf_handle": "rot-1"}
            )


class TestEmailAttachments:
    def test_attachment_may_contain_validated_email(self) -> None:
        inner_email = {
            "class_name": "EmailValidateResponse",
            "response": {
                "class_name": "EmailValidateResponseOk",
                "email_handle": {
                    "class_name": "EmailHandle",
                    "file_handle": "f-inner",
                    "signed_hash": "h-inner",
                    "from_addr": [["Alice", "alice@example.com"]],
                    "attachments": [
                        {
                            "class_name": "EmailAttachment",
                            "unvalidated_file_handle": "u-pdf",
                            "media_type": {"media_type": "application/pdf", "confidence": 1.0},
                            "validated": {
                                "class_name": "PdfValidateResponse",
                                "response": {
                                    "class_name": "PdfValidateResponseOk",
                                    "pdf_handle": "pdf-inner",
                                },
                            },
                        }
                    ],
                },
            },
        }
        outer = EmailValidateResponse.model_validate(
            {
                "class_name": "EmailValidateResponse",
                "response": {
                    "class_name": "EmailValidateResponseOk",
                    "email_handle": {
                        "class_name": "EmailHandle",
                        "file_handle": "f-outer",
                        "signed_hash": "h-outer",
                        "to_addr": "undisclosed-recipients",
                        "attachments": [
                            {
                                "class_name": "EmailAttachment",
                                "unvalidated_file_handle": "u-eml",
                                "media_type": {
                                    "media_type": "message/rfc822",
                                    "confidence": 0.9,
                                },
                                "validated": inner_email,
                                "name": "forwarded.eml",
                            },
                            {
                                "class_name": "EmailAttachment",
                                "unvalidated_file_handle": "u-txt",
                                "media_type": {"media_type": "text/plain", "confidence": 0.8},
                            },
                        ],
                    },
                },
            }
        )

        assert isinstance(outer.response, EmailValidateResponseOk)
        attachments = outer.response.email_handle.attachments
        nested = attachments[0].validated
        assert isinstance(nested, EmailValidateResponse)
        inner_handle = nested.response.email_handle
        assert inner_handle.from_addr == [("Alice", "alice@example.com")]
        assert inner_handle.attachments[0].validated.response.pdf_handle == "pdf-inner"
        assert attachments[1].validated is None

    def test_image_attachment_validation(self) -> None:
        envelope = ImgValidateResponse.model_validate(
            {
                "class_name": "ImgValidateResponse",
                "response": {"class_name": "ImgValidateResponseError", "error": "bad"},
            }
        )
        assert envelope.response.error == "bad"
