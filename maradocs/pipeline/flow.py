from maradocs.endpoints.img import ImgEndpoint
from maradocs.endpoints.pdf import PdfEndpoint
from maradocs.logging.logger import Log
from maradocs.models.common import Handle
from maradocs.models.img import (
    ImgExtractQuadrilateralRequest,
    ImgFindDocumentsRequest,
    ImgToPdfOptions,
    ImgToPdfRequest,
    ImgValidateRequest,
)
from maradocs.models.pdf import (
    PdfComposePdf,
    PdfComposeRequest,
    PdfOcrToPdfRequest,
    PdfOptimizeRequest,
    PdfOrientationRequest,
    PdfValidateRequest,
)
from maradocs.pipeline.options import OcrImgOptions, OcrPdfOptions
from maradocs.transfer.transfer_manager import TransferManager
from maradocs.validation.unwrapper import unwrap


class Flow:
    """Multi-step conversions built from single jobs.

    Image pipeline: upload -> validate -> find documents (optional) ->
    extract each document -> convert each image to PDF -> compose ->
    orientation -> OCR -> optimize.

    PDF pipeline: upload -> validate -> orientation -> OCR -> optimize.

    Every ``*_handle`` entry point starts from content validated earlier.
    A failing step aborts the whole flow; intermediate assets already created
    on the server are left for the server to expire.
    """

    def __init__(
        self,
        transfer: TransferManager,
        img: ImgEndpoint,
        pdf: PdfEndpoint,
    ) -> None:
        self._transfer = transfer
        self._img = img
        self._pdf = pdf

    def ocr_img(self, content: bytes, options: OcrImgOptions | None = None) -> Handle:
        """OCR an image into an optimized, searchable PDF and return its handle."""
        options = options or OcrImgOptions()

        # Step 1: Upload
        uploaded = self._transfer.upload(content, options.on_progress, filename="image.jpg")

        # Step 2: Validate
        validated = self._img.validate(
            ImgValidateRequest(unvalidated_file_handle=uploaded.unvalidated_file_handle)
        )
        img_handle = unwrap(validated)
        Log.info("Image validated")

        return self.ocr_img_handle(img_handle, options)

    def ocr_img_handle(self, img_handle: Handle, options: OcrImgOptions | None = None) -> Handle:
        """Run the image pipeline from an already validated image handle."""
        options = options or OcrImgOptions()

        # Steps 3-4: Find and extract documents
        img_handles = self._extract_documents(img_handle) if options.extract_document else []
        if not img_handles:
            img_handles = [img_handle]

        # Step 5: Convert every image to its own PDF, then join them in order
        pdf_handles = [self._img_to_pdf(handle, options.pdf_options) for handle in img_handles]
        composed = self._pdf.compose(
            PdfComposeRequest(pdfs=[PdfComposePdf(pdf_handle=h) for h in pdf_handles])
        )
        Log.info(f"Composed {len(pdf_handles)} PDF(s) into one document")

        return self._make_searchable(composed.pdf_handle)

    def ocr_pdf(self, content: bytes, options: OcrPdfOptions | None = None) -> Handle:
        """Make an uploaded PDF searchable, with orientation fixed and size optimized."""
        options = options or OcrPdfOptions()

        # Step 1: Upload
        uploaded = self._transfer.upload(content, options.on_progress, filename="document.pdf")

        # Step 2: Validate
        validated = self._pdf.validate(
            PdfValidateRequest(
                unvalidated_file_handle=uploaded.unvalidated_file_handle,
                password=options.password,
            )
        )
        pdf_handle = unwrap(validated)
        Log.info("PDF validated")

        return self.ocr_pdf_handle(pdf_handle)

    def ocr_pdf_handle(self, pdf_handle: Handle) -> Handle:
        """Run the PDF pipeline from an already validated PDF handle."""
        return self._make_searchable(pdf_handle)

    def _extract_documents(self, img_handle: Handle) -> list[Handle]:
        found = self._img.find_documents(ImgFindDocumentsRequest(img_handle=img_handle))
        Log.info(f"Found {len(found.documents)} document(s) in image")
        extracted: list[Handle] = []
        for document in found.documents:
            result = self._img.extract_quadrilateral(
                ImgExtractQuadrilateralRequest(
                    img_handle=img_handle,
                    quadrilateral=document.quadrilateral,
                )
            )
            extracted.append(result.img_handle)
        return extracted

    def _img_to_pdf(self, img_handle: Handle, pdf_options: ImgToPdfOptions | None) -> Handle:
        return self._img.to_pdf(
            ImgToPdfRequest(img_handle=img_handle, options=pdf_options)
        ).pdf_handle

    def _make_searchable(self, pdf_handle: Handle) -> Handle:
        # Orientation
        oriented = self._pdf.orientation(PdfOrientationRequest(pdf_handle=pdf_handle))
        rotated_pages = [
            page for page, (angle, _) in enumerate(oriented.orientations) if angle != 0
        ]
        Log.info(
            f"Orientation corrected: {len(rotated_pages)} of "
            f"{len(oriented.orientations)} page(s) rotated",
            pages=rotated_pages,
        )

        # OCR
        ocr = self._pdf.ocr_to_pdf(PdfOcrToPdfRequest(pdf_handle=oriented.rotated_pdf_handle))
        Log.info("Text layer added")

        # Optimize
        optimized = self._pdf.optimize(PdfOptimizeRequest(pdf_handle=ocr.pdf_handle))
        Log.info("PDF optimized")
        return optimized.pdf_handle
